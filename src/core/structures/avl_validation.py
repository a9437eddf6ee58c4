import math
from typing import Optional

from src.core.structures.avl_tree import AVLNode, AVLTree


class AVLInvariantError(ValueError):
    """Violação de uma invariante da árvore (ordem, altura ou balanceamento)."""


def avl_height_bound(n: int) -> float:
    """
    Altura máxima de uma AVL com n chaves (pior caso, árvores de Fibonacci):
    1.44 * log2(n + 2) - 0.328
    """
    if n < 0:
        raise ValueError("O número de chaves não pode ser negativo.")
    return 1.44 * math.log2(n + 2) - 0.328


def validate_tree(tree: AVLTree) -> int:
    """
    Percorre a árvore inteira e confere ordem BST, alturas e balanceamento.
    Retorna a altura verificada; levanta AVLInvariantError na primeira falha.
    """
    return _validate(tree.root, None, None)


def is_valid_avl(tree: AVLTree) -> bool:
    try:
        validate_tree(tree)
    except AVLInvariantError:
        return False
    return True


def _validate(node: Optional[AVLNode], low, high) -> int:
    if node is None:
        return 0

    # Limites estritos: chave repetida também é violação de ordem
    if low is not None and not node.key > low:
        raise AVLInvariantError(f"Ordem violada: chave {node.key!r} deveria ser > {low!r}")
    if high is not None and not node.key < high:
        raise AVLInvariantError(f"Ordem violada: chave {node.key!r} deveria ser < {high!r}")

    left_h = _validate(node.left, low, node.key)
    right_h = _validate(node.right, node.key, high)

    expected = 1 + max(left_h, right_h)
    if node.height != expected:
        raise AVLInvariantError(
            f"Altura incorreta no nó {node.key!r}: armazenada {node.height}, esperada {expected}"
        )

    if abs(left_h - right_h) > 1:
        raise AVLInvariantError(
            f"Desbalanceado no nó {node.key!r}: esq={left_h}, dir={right_h}"
        )

    return expected
