from typing import Iterable, List, Optional, Tuple
from sayings_db.core.models.saying import Saying
from sayings_db.core.structures.avl_tree import AVLTree, DuplicateKeyError

class SayingsDatabase:
    """
    Banco de dados em memória de provérbios havaianos.
    Conecta quem constrói as Sayings (entrada de dados) ao índice AVL (consultas).
    """
    DUPLICATE_TAG = "[Saying Duplicada]"

    def __init__(self):
        self.index = AVLTree()

    def add(self, hawaiian: str, english: str) -> Saying:
        """Cria e insere uma Saying. Propaga DuplicateKeyError."""
        saying = Saying(hawaiian, english)
        self.index.insert(saying)
        return saying

    def load(self, pairs: Iterable[Tuple[str, str]]) -> int:
        """
        Insere pares (havaiano, inglês) em sequência.
        Duplicatas são escritas rejeitadas: reportadas e ignoradas.
        Retorna quantas Sayings foram carregadas.
        """
        loaded = 0
        for hawaiian, english in pairs:
            try:
                self.add(hawaiian, english)
                loaded += 1
            except DuplicateKeyError as e:
                print(f"{self.DUPLICATE_TAG} {e}")
        return loaded

    # --- Consultas (delegam ao índice) ---

    def me_hua(self, word: str) -> List[Saying]:
        """Sayings cujo texto havaiano contém a palavra."""
        return self.index.find_by_key_substring(word)

    def sayings_with(self, word: str) -> List[Saying]:
        """Sayings cuja tradução em inglês contém a palavra."""
        return self.index.find_by_translation_substring(word)

    def first(self) -> Optional[Saying]:
        return self.index.first()

    def last(self) -> Optional[Saying]:
        return self.index.last()

    def member(self, hawaiian: str) -> bool:
        return self.index.member(hawaiian)

    def predecessor(self, hawaiian: str) -> Optional[Saying]:
        return self.index.predecessor(hawaiian)

    def successor(self, hawaiian: str) -> Optional[Saying]:
        return self.index.successor(hawaiian)

    def all_sayings(self) -> List[Saying]:
        return self.index.in_order()

    def __len__(self):
        return len(self.index)
