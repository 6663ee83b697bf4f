# 文件: vonmises3d/materials/models/__init__.py
"""
预置材料模型

- VonMisesMaterial3D: 三维 Von Mises 弹塑性材料 (线性等向硬化)
"""

from .von_mises_3d import VonMisesMaterial3D

__all__ = ['VonMisesMaterial3D']
