import sys
import os

# Setup de importação
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import pytest

from src.core.structures.avl_tree import AVLTree, RotationCase, insert, traverse_preorder


def test_avl_balancing():
    print("--- Iniciando Teste da AVL: sequência de referência ---")

    avl = AVLTree()

    # Inserção crescente que degeneraria uma BST comum
    ids_to_insert = [10, 20, 30, 40, 50, 25]
    print(f"Inserindo chaves na ordem: {ids_to_insert}")

    for key in ids_to_insert:
        avl.insert(key)

    preorder = list(avl.traverse_preorder())
    print(f"Pré-ordem final: {preorder}")

    assert preorder == [30, 20, 10, 25, 40, 50], "Pré-ordem diferente da esperada"
    assert avl.root.key == 30, "A raiz deveria ter girado para 30"
    assert avl.height == 3
    assert len(avl) == 6
    assert avl.rotation_counts[RotationCase.RIGHT_RIGHT] == 2
    assert avl.rotation_counts[RotationCase.RIGHT_LEFT] == 1
    assert avl.last_rotations == [RotationCase.RIGHT_LEFT]

    print(">> SUCESSO: Árvore rebalanceada corretamente.")


def test_first_three_keys_rotate_once():
    avl = AVLTree()
    avl.insert(10).insert(20)
    assert avl.last_rotations == []

    avl.insert(30)
    assert avl.last_rotations == [RotationCase.RIGHT_RIGHT], "Deveria ocorrer uma única rotação RR"
    assert sum(avl.rotation_counts.values()) == 1
    assert list(avl.traverse_preorder()) == [20, 10, 30]


def test_empty_tree():
    avl = AVLTree()
    assert avl.is_empty()
    assert avl.height == 0
    assert len(avl) == 0
    assert list(avl.traverse_preorder()) == []
    assert avl.search(1) is False


def test_single_insert_creates_leaf():
    avl = AVLTree()
    avl.insert(42)
    assert avl.root.key == 42
    assert avl.root.height == 1
    assert avl.root.left is None and avl.root.right is None


def test_duplicate_is_noop():
    print("--- Teste: chave duplicada ---")
    avl = AVLTree()
    for key in [10, 20, 30]:
        avl.insert(key)

    root_before = avl.root
    heights_before = (avl.root.height, avl.root.left.height, avl.root.right.height)

    avl.insert(20)
    avl.insert(30)

    assert avl.root is root_before
    assert (avl.root.height, avl.root.left.height, avl.root.right.height) == heights_before
    assert len(avl) == 3, "Duplicata não deve criar nó"
    assert avl.last_rotations == []
    assert list(avl.traverse_preorder()) == [20, 10, 30]
    print(">> SUCESSO: Duplicata ignorada.")


def test_search_and_contains():
    avl = AVLTree()
    for key in [50, 30, 70, 20, 40, 60, 80]:
        avl.insert(key)

    assert avl.search(40)
    assert 80 in avl
    assert 55 not in avl
    assert avl.get_all_keys() == [20, 30, 40, 50, 60, 70, 80]


def test_traversal_is_lazy_and_restartable():
    avl = AVLTree()
    for key in [10, 20, 30, 40, 50, 25]:
        avl.insert(key)

    it = avl.traverse_preorder()
    assert next(it) == 30
    assert next(it) == 20

    # Novo gerador recomeça da raiz
    assert list(avl.traverse_preorder()) == [30, 20, 10, 25, 40, 50]
    assert list(avl.traverse_preorder()) == [30, 20, 10, 25, 40, 50]


def test_rotation_keeps_node_identity():
    avl = AVLTree()
    avl.insert(10)
    node_10 = avl.root
    avl.insert(20)
    node_20 = avl.root.right

    avl.insert(30)

    assert avl.root is node_20, "Rotação deve promover o nó existente"
    assert avl.root.left is node_10
    assert node_10.height == 1
    assert node_20.height == 2


def test_functional_api():
    tree = AVLTree()
    for key in [3, 2, 1]:
        tree = insert(tree, key)
    assert list(traverse_preorder(tree)) == [2, 1, 3]


def test_string_keys():
    avl = AVLTree()
    for name in ["Alice", "Bob", "Charlie"]:
        avl.insert(name)
    assert avl.root.key == "Bob"
    assert avl.get_all_keys() == ["Alice", "Bob", "Charlie"]


def test_incomparable_key_leaves_tree_unchanged():
    avl = AVLTree()
    avl.insert(1).insert(2)

    with pytest.raises(TypeError):
        avl.insert("x")

    assert len(avl) == 2
    assert list(avl.traverse_preorder()) == [1, 2]


def test_verbose_trace(capsys):
    avl = AVLTree(verbose=True)
    for key in [10, 20, 30, 20]:
        avl.insert(key)

    out = capsys.readouterr().out
    assert "[AVL INSERT] Chave 30 criada" in out
    assert "[AVL ROTATE] Caso RR no nó 10" in out
    assert "[AVL DUP] Chave 20 já presente" in out


def test_silent_by_default(capsys):
    avl = AVLTree()
    for key in [10, 20, 30]:
        avl.insert(key)
    assert capsys.readouterr().out == ""


if __name__ == "__main__":
    test_avl_balancing()
    test_first_three_keys_rotate_once()
    test_duplicate_is_noop()
