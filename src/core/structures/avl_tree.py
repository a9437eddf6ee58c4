from collections import Counter
from typing import Any, Iterator, List, Optional


class RotationCase:
    """Casos de rebalanceamento aplicados durante a inserção."""
    LEFT_LEFT = "LL"
    RIGHT_RIGHT = "RR"
    LEFT_RIGHT = "LR"
    RIGHT_LEFT = "RL"


class AVLNode:
    """
    Nó interno da Árvore AVL.
    Armazena apenas a chave e a altura da subárvore enraizada nele.
    """
    def __init__(self, key: Any):
        self.key = key
        self.left: Optional['AVLNode'] = None
        self.right: Optional['AVLNode'] = None
        self.height = 1         # Folha tem altura 1

    def __repr__(self):
        return f"AVLNode(key={self.key!r}, h={self.height})"


class AVLTree:
    """
    Árvore AVL de chaves únicas.
    Inserção em O(log n); após cada inserção, para todo nó,
    |altura(esq) - altura(dir)| <= 1.
    """
    def __init__(self, verbose: bool = False):
        self.root: Optional[AVLNode] = None
        self.verbose = verbose
        self.rotation_counts: Counter = Counter()
        self.last_rotations: List[str] = []
        self._size = 0

    def insert(self, key) -> 'AVLTree':
        """
        Insere a chave e rebalanceia a árvore automaticamente.
        Chave duplicada: nada muda. Retorna a própria árvore.
        """
        self.last_rotations = []
        self.root = self._insert_recursive(self.root, key)
        return self

    def search(self, key) -> bool:
        """Busca a chave em O(log n)."""
        current = self.root
        while current:
            if key == current.key:
                return True
            elif key < current.key:
                current = current.left
            else:
                current = current.right
        return False

    def __contains__(self, key) -> bool:
        return self.search(key)

    def __len__(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self.root is None

    @property
    def height(self) -> int:
        return self._get_height(self.root)

    def _insert_recursive(self, node: Optional[AVLNode], key) -> AVLNode:
        # 1. Inserção normal de BST
        if not node:
            self._size += 1
            self.log(f"[AVL INSERT] Chave {key!r} criada")
            return AVLNode(key)

        if key < node.key:
            node.left = self._insert_recursive(node.left, key)
        elif key > node.key:
            node.right = self._insert_recursive(node.right, key)
        else:
            # Chave já existe: subárvore devolvida intacta
            self.log(f"[AVL DUP] Chave {key!r} já presente, ignorada")
            return node

        # 2. Atualizar altura do ancestral
        node.height = 1 + max(self._get_height(node.left), self._get_height(node.right))

        # 3. Fator de balanceamento
        balance = self._get_balance(node)

        # 4. Rotações. O lado do desequilíbrio é decidido comparando a chave
        # inserida com a chave do filho mais próximo.

        # Caso 1 - Rotação à Direita (Left-Left)
        if balance > 1 and key < node.left.key:
            self._record(RotationCase.LEFT_LEFT, node)
            return self._rotate_right(node)

        # Caso 2 - Rotação à Esquerda (Right-Right)
        if balance < -1 and key > node.right.key:
            self._record(RotationCase.RIGHT_RIGHT, node)
            return self._rotate_left(node)

        # Caso 3 - Rotação Dupla à Direita (Left-Right)
        if balance > 1 and key > node.left.key:
            self._record(RotationCase.LEFT_RIGHT, node)
            node.left = self._rotate_left(node.left)
            return self._rotate_right(node)

        # Caso 4 - Rotação Dupla à Esquerda (Right-Left)
        if balance < -1 and key < node.right.key:
            self._record(RotationCase.RIGHT_LEFT, node)
            node.right = self._rotate_right(node.right)
            return self._rotate_left(node)

        return node

    # --- Métodos Auxiliares e Rotações ---

    def _get_height(self, node: Optional[AVLNode]) -> int:
        if not node:
            return 0
        return node.height

    def _get_balance(self, node: Optional[AVLNode]) -> int:
        if not node:
            return 0
        return self._get_height(node.left) - self._get_height(node.right)

    def _rotate_left(self, x: AVLNode) -> AVLNode:
        """
        Rotação simples à esquerda: promove x.right.
        Usada quando o peso está na direita (Right-Right).
        """
        y = x.right
        T2 = y.left

        y.left = x
        x.right = T2

        # x desceu: sua altura precisa estar correta antes da de y
        x.height = 1 + max(self._get_height(x.left), self._get_height(x.right))
        y.height = 1 + max(self._get_height(y.left), self._get_height(y.right))

        return y

    def _rotate_right(self, y: AVLNode) -> AVLNode:
        """
        Rotação simples à direita: promove y.left.
        Usada quando o peso está na esquerda (Left-Left).
        """
        x = y.left
        T2 = x.right

        x.right = y
        y.left = T2

        y.height = 1 + max(self._get_height(y.left), self._get_height(y.right))
        x.height = 1 + max(self._get_height(x.left), self._get_height(x.right))

        return x

    def _record(self, case: str, node: AVLNode):
        self.rotation_counts[case] += 1
        self.last_rotations.append(case)
        self.log(f"[AVL ROTATE] Caso {case} no nó {node.key!r}")

    # --- Percursos ---

    def traverse_preorder(self) -> Iterator:
        """
        Percurso pré-ordem (raiz, esquerda, direita).
        Cada chamada devolve um novo gerador.
        """
        return self._preorder(self.root)

    def _preorder(self, node: Optional[AVLNode]) -> Iterator:
        if node:
            yield node.key
            yield from self._preorder(node.left)
            yield from self._preorder(node.right)

    def traverse_inorder(self) -> Iterator:
        """Percurso em ordem: chaves em ordem crescente."""
        return self._inorder(self.root)

    def _inorder(self, node: Optional[AVLNode]) -> Iterator:
        if node:
            yield from self._inorder(node.left)
            yield node.key
            yield from self._inorder(node.right)

    def get_all_keys(self) -> List:
        """Retorna todas as chaves (in-order) para debug."""
        return list(self.traverse_inorder())

    def log(self, msg: str):
        if self.verbose:
            print(msg)

    def __repr__(self):
        return f"AVLTree(size={self._size}, height={self.height}, preorder={list(self.traverse_preorder())})"


def insert(tree: AVLTree, key) -> AVLTree:
    """Atalho funcional: insere `key` em `tree` e devolve a árvore."""
    return tree.insert(key)


def traverse_preorder(tree: AVLTree) -> Iterator:
    return tree.traverse_preorder()
