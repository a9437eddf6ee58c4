import sys
import os
from argparse import ArgumentParser
from typing import List, Optional, Sequence

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..', '..')))

from src.core.structures.avl_tree import AVLTree, insert, traverse_preorder
from src.core.structures.avl_validation import AVLInvariantError, validate_tree
from src.core.analysis.height_profile import HeightProfiler


class AVLDemo:
    """Parâmetros padrão da demonstração."""
    DEFAULT_KEYS = (10, 20, 30, 40, 50, 25)


def run_demo(keys: Sequence[int], verbose: bool = False, check: bool = False) -> AVLTree:
    """
    Insere as chaves uma a uma, imprimindo cada inserção e, ao final,
    o percurso pré-ordem. Com check=True as invariantes são conferidas
    após cada inserção (AVLInvariantError se falhar).
    """
    tree = AVLTree(verbose=verbose)

    for key in keys:
        tree = insert(tree, key)
        print(f"Inserted {key}")
        if check:
            validate_tree(tree)

    print("Preorder traversal (Root Left Right): " + " ".join(str(k) for k in traverse_preorder(tree)))
    return tree


def build_parser() -> ArgumentParser:
    parser = ArgumentParser(description="Demonstração de inserção em Árvore AVL.")
    parser.add_argument('keys', nargs='*', type=int,
                        help="Chaves inteiras a inserir (padrão: 10 20 30 40 50 25)")
    parser.add_argument('--verbose', action='store_true',
                        help="Imprime o passo a passo das rotações")
    parser.add_argument('--check', action='store_true',
                        help="Valida as invariantes AVL após cada inserção")
    parser.add_argument('--profile', type=int, metavar='N',
                        help="Mede a altura inserindo 0..N-1 em ordem crescente")
    parser.add_argument('--plot', metavar='PATH',
                        help="Com --profile, salva o gráfico de altura em PATH")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    keys = args.keys if args.keys else list(AVLDemo.DEFAULT_KEYS)

    try:
        run_demo(keys, verbose=args.verbose, check=args.check)
    except AVLInvariantError as e:
        print(f"[AVL ERRO] {e}")
        return 1

    if args.profile is not None:
        profiler = HeightProfiler(range(args.profile))
        print(f"\n[AVL PERFIL] n={args.profile}")
        for name, value in profiler.summary().items():
            print(f"  {name:13s}: {round(value, 3)}")
        if args.plot:
            if profiler.heights.size == 0:
                print("[AVL ERRO] Perfil vazio, gráfico não gerado.")
                return 1
            print(f"  >> Gráfico salvo em {profiler.plot(args.plot)}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
