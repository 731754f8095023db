from dataclasses import dataclass, field

@dataclass(frozen=True, order=True)
class Saying:
    """
    Um provérbio havaiano (ʻōlelo noʻeau) com a sua tradução em inglês.
    Decorador @dataclass(order=True) compara apenas pelas palavras havaianas:
    duas Sayings com o mesmo texto havaiano são consideradas duplicatas,
    independente da tradução.
    """
    hawaiian_words: str
    english_translation: str = field(compare=False)

    @property
    def key(self) -> str:
        """Chave de ordenação usada pelo índice AVL."""
        return self.hawaiian_words

    @property
    def translation(self) -> str:
        return self.english_translation

    def __repr__(self):
        return f"Saying('{self.hawaiian_words}' -> '{self.english_translation}')"
