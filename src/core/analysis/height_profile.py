import os
from typing import Dict, Iterable

import numpy as np
import matplotlib.pyplot as plt

from src.core.structures.avl_tree import AVLTree
from src.core.structures.avl_validation import avl_height_bound


class HeightProfiler:
    """
    Mede o crescimento da altura da AVL inserção a inserção e compara
    com o limite teórico de pior caso 1.44 * log2(n + 2) - 0.328.
    """
    PATH_PLOT = "data/avl_height_profile.png"

    def __init__(self, keys: Iterable):
        self.tree = AVLTree()
        sizes, heights, bounds = [], [], []

        for key in keys:
            self.tree.insert(key)
            n = len(self.tree)
            sizes.append(n)
            heights.append(self.tree.height)
            bounds.append(avl_height_bound(n))

        self.sizes = np.array(sizes, dtype=int)
        self.heights = np.array(heights, dtype=int)
        self.bounds = np.array(bounds, dtype=float)

    def within_bound(self) -> bool:
        """True se a altura nunca ultrapassou o limite."""
        return bool(np.all(self.heights <= self.bounds))

    def worst_slack(self) -> float:
        """Menor folga (limite - altura) observada; negativa indica violação."""
        if self.heights.size == 0:
            raise ValueError("Perfil sem dados: nenhuma chave inserida.")
        return float(np.min(self.bounds - self.heights))

    def summary(self) -> Dict[str, float]:
        return {
            'final_size': len(self.tree),
            'final_height': self.tree.height,
            'final_bound': avl_height_bound(len(self.tree)),
            'worst_slack': self.worst_slack() if self.heights.size else 0.0,
            'rotations': sum(self.tree.rotation_counts.values()),
        }

    def plot(self, filepath: str = PATH_PLOT) -> str:
        """Gera o gráfico altura observada x limite teórico."""
        if self.heights.size == 0:
            raise ValueError("Perfil sem dados: nada para plotar.")

        directory = os.path.dirname(filepath)
        if directory:
            os.makedirs(directory, exist_ok=True)

        fig = plt.figure(figsize=(10, 6))
        plt.step(self.sizes, self.heights, 'b-', where='post', label='Altura Observada')
        plt.plot(self.sizes, self.bounds, 'r--', label='Limite AVL (1.44 log2(n+2) - 0.328)')
        plt.plot(self.sizes, np.log2(self.sizes + 1), 'g:', label='log2(n+1) (árvore perfeita)')
        plt.xlabel('Número de chaves (n)')
        plt.ylabel('Altura')
        plt.title('Crescimento da Altura da Árvore AVL')
        plt.legend()
        plt.grid(True)
        plt.savefig(filepath)
        plt.close(fig)
        return filepath
