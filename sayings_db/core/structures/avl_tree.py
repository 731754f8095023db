from typing import Iterator, List, Optional, Union
from sayings_db.core.models.saying import Saying

class DuplicateKeyError(ValueError):
    """Inserção rejeitada: já existe uma Saying com as mesmas palavras havaianas."""
    def __init__(self, key: str):
        super().__init__(f"Saying já existe no banco de dados: '{key}'")
        self.key = key

class AVLNode:
    """
    Nó interno da Árvore AVL.
    Armazena a Saying (a chave é o texto havaiano) e a altura.
    """
    def __init__(self, saying: Saying):
        self.saying = saying
        self.left = None
        self.right = None
        self.height = 1         # Altura inicial do nó é 1

    @property
    def key(self) -> str:
        return self.saying.key

class AVLTree:
    """
    Índice ordenado e balanceado de Sayings, ordenado pelas palavras havaianas.
    Garante inserção, busca, predecessor e sucessor em O(log n).
    Não é thread-safe: quem compartilhar a árvore entre threads deve sincronizar.
    """
    def __init__(self):
        self.root = None
        self._size = 0

    def insert(self, saying: Saying):
        """
        Insere uma Saying e rebalanceia a árvore automaticamente.
        Lança DuplicateKeyError se a chave já existir (a árvore não é alterada).
        """
        self.root = self._insert_recursive(self.root, saying)
        self._size += 1

    def search(self, key) -> Optional[Saying]:
        """Busca uma Saying pela chave em O(log n). Retorna a Saying ou None."""
        key = self._key_of(key)
        current = self.root
        while current:
            if key == current.key:
                return current.saying
            elif key < current.key:
                current = current.left
            else:
                current = current.right
        return None

    def _insert_recursive(self, node, saying: Saying):
        # 1. Inserção normal de BST (Binary Search Tree)
        if not node:
            return AVLNode(saying)

        key = saying.key
        if key < node.key:
            node.left = self._insert_recursive(node.left, saying)
        elif key > node.key:
            node.right = self._insert_recursive(node.right, saying)
        else:
            # Nenhum ancestral foi modificado ainda: as atribuições acima só
            # acontecem depois que a recursão retorna.
            raise DuplicateKeyError(key)

        # 2. Atualizar altura do nó ancestral
        node.height = 1 + max(self._get_height(node.left), self._get_height(node.right))

        # 3. Obter o fator de balanceamento para verificar se houve desequilíbrio
        balance = self._get_balance(node)

        # 4. Se o nó estiver desbalanceado, aplicar Rotações.
        # O lado em que a nova chave caiu decide entre rotação simples e dupla.

        # Caso 1 - Rotação à Direita (Left-Left Case)
        if balance > 1 and key < node.left.key:
            return self._rotate_right(node)

        # Caso 2 - Rotação à Esquerda (Right-Right Case)
        if balance < -1 and key > node.right.key:
            return self._rotate_left(node)

        # Caso 3 - Rotação Dupla à Direita (Left-Right Case)
        if balance > 1 and key > node.left.key:
            node.left = self._rotate_left(node.left)
            return self._rotate_right(node)

        # Caso 4 - Rotação Dupla à Esquerda (Right-Left Case)
        if balance < -1 and key < node.right.key:
            node.right = self._rotate_right(node.right)
            return self._rotate_left(node)

        return node

    # --- Consultas Ordenadas ---

    def first(self) -> Optional[Saying]:
        """Retorna a Saying de menor chave, ou None se a árvore estiver vazia."""
        node = self.root
        if not node:
            return None
        while node.left:
            node = node.left
        return node.saying

    def last(self) -> Optional[Saying]:
        """Retorna a Saying de maior chave, ou None se a árvore estiver vazia."""
        node = self.root
        if not node:
            return None
        while node.right:
            node = node.right
        return node.saying

    def member(self, key) -> bool:
        """Verifica se existe uma Saying com essa chave (str ou Saying)."""
        return self._member_recursive(self.root, self._key_of(key))

    def _member_recursive(self, node, key: str) -> bool:
        if not node:
            return False
        if key < node.key:
            return self._member_recursive(node.left, key)
        elif key > node.key:
            return self._member_recursive(node.right, key)
        return True

    def predecessor(self, key) -> Optional[Saying]:
        """
        Retorna a Saying com a maior chave estritamente menor que `key`.
        A chave consultada não precisa estar na árvore.
        """
        return self._predecessor_recursive(self.root, self._key_of(key))

    def _predecessor_recursive(self, node, key: str) -> Optional[Saying]:
        if not node:
            return None
        if key <= node.key:
            return self._predecessor_recursive(node.left, key)
        better = self._predecessor_recursive(node.right, key)
        return better if better else node.saying

    def successor(self, key) -> Optional[Saying]:
        """
        Retorna a Saying com a menor chave estritamente maior que `key`.
        A chave consultada não precisa estar na árvore.
        """
        return self._successor_recursive(self.root, self._key_of(key))

    def _successor_recursive(self, node, key: str) -> Optional[Saying]:
        if not node:
            return None
        if key >= node.key:
            return self._successor_recursive(node.right, key)
        better = self._successor_recursive(node.left, key)
        return better if better else node.saying

    # --- Travessias e Buscas por Substring ---

    def in_order(self) -> List[Saying]:
        """Retorna todas as Sayings em ordem crescente de chave (nova lista a cada chamada)."""
        sayings: List[Saying] = []
        self._in_order(self.root, sayings)
        return sayings

    def _in_order(self, node, sayings: List[Saying]):
        if node:
            self._in_order(node.left, sayings)
            sayings.append(node.saying)
            self._in_order(node.right, sayings)

    def find_by_key_substring(self, needle: str) -> List[Saying]:
        """Sayings cujo texto havaiano contém `needle` (sensível a maiúsculas). O(n)."""
        results: List[Saying] = []
        self._collect(self.root, lambda s: needle in s.key, results)
        return results

    def find_by_translation_substring(self, needle: str) -> List[Saying]:
        """Sayings cuja tradução em inglês contém `needle` (sensível a maiúsculas). O(n)."""
        results: List[Saying] = []
        self._collect(self.root, lambda s: needle in s.translation, results)
        return results

    def _collect(self, node, matches, results: List[Saying]):
        # Pré-ordem: a ordem do resultado não faz parte do contrato
        if not node:
            return
        if matches(node.saying):
            results.append(node.saying)
        self._collect(node.left, matches, results)
        self._collect(node.right, matches, results)

    # --- Métodos Auxiliares e Rotações ---

    @staticmethod
    def _key_of(target: Union[str, Saying]) -> str:
        if isinstance(target, Saying):
            return target.key
        return target

    def _get_height(self, node):
        if not node:
            return 0
        return node.height

    def _get_balance(self, node):
        if not node:
            return 0
        return self._get_height(node.left) - self._get_height(node.right)

    def _rotate_left(self, z):
        """
        Realiza rotação simples à esquerda.
        Usada quando o peso está na direita (Right-Right).
        """
        y = z.right
        T2 = y.left

        # Rotação
        y.left = z
        z.right = T2

        # Atualiza alturas (z agora é filho de y)
        z.height = 1 + max(self._get_height(z.left), self._get_height(z.right))
        y.height = 1 + max(self._get_height(y.left), self._get_height(y.right))

        return y

    def _rotate_right(self, z):
        """
        Realiza rotação simples à direita.
        Usada quando o peso está na esquerda (Left-Left).
        """
        y = z.left
        T3 = y.right

        y.right = z
        z.left = T3

        z.height = 1 + max(self._get_height(z.left), self._get_height(z.right))
        y.height = 1 + max(self._get_height(y.left), self._get_height(y.right))

        return y

    @property
    def height(self) -> int:
        return self._get_height(self.root)

    def is_balanced(self) -> bool:
        """
        Verifica a árvore inteira: fator de balanceamento em [-1, 1],
        chaves estritamente ordenadas e alturas armazenadas corretas.
        """
        return self._check(self.root, None, None) is not None

    def _check(self, node, low, high) -> Optional[int]:
        # Retorna a altura real da subárvore, ou None se algo estiver violado
        if not node:
            return 0
        if (low is not None and node.key <= low) or (high is not None and node.key >= high):
            return None
        left = self._check(node.left, low, node.key)
        right = self._check(node.right, node.key, high)
        if left is None or right is None or abs(left - right) > 1:
            return None
        real_height = 1 + max(left, right)
        if real_height != node.height:
            return None
        return real_height

    def __len__(self):
        return self._size

    def __contains__(self, key):
        return self.member(key)

    def __iter__(self) -> Iterator[Saying]:
        return iter(self.in_order())

    def __repr__(self):
        return f"AVLTree(size={self._size}, height={self.height})"
