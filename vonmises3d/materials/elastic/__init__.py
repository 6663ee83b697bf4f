# 文件: vonmises3d/materials/elastic/__init__.py
"""
弹性模型模块

提供弹性响应模型:
- IsotropicElastic: 各向同性线弹性 (弹塑性模型的弹性部分)
"""

from .isotropic import IsotropicElastic, POISSON_RATIO_INCOMPRESSIBLE

__all__ = ['IsotropicElastic', 'POISSON_RATIO_INCOMPRESSIBLE']
