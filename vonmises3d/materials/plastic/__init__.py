# 文件: vonmises3d/materials/plastic/__init__.py
"""
塑性模型组件模块

提供塑性本构的核心组件:
- 屈服函数 (yield_functions): VonMises
- 硬化规律 (hardening): LinearIsotropicHardening
- 返回映射 (return_mapping): RadialReturn
"""

from .yield_functions import VonMises
from .hardening import LinearIsotropicHardening
from .return_mapping import RadialReturn, DEVIATORIC_PROJECTOR

__all__ = [
    # 屈服函数
    'VonMises',

    # 硬化规律
    'LinearIsotropicHardening',

    # 返回映射
    'RadialReturn',
    'DEVIATORIC_PROJECTOR',
]
