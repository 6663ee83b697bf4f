# 文件: vonmises3d/__init__.py
"""
vonmises3d

三维 (6 分量 Voigt) 率无关 Von Mises 弹塑性本构，供有限元积分点循环调用。
"""

from vonmises3d.materials import (
    # 核心接口
    Material,
    StressResult,

    # 异常
    VonMisesMaterialError,
    MaterialParameterError,
    IncompressibleMaterialError,
    PlasticStrainDecreaseError,

    # 状态
    PlasticState,
    StateSnapshot,

    # 工厂
    MaterialFactory,

    # 组件
    IsotropicElastic,
    VonMises,
    LinearIsotropicHardening,
    RadialReturn,

    # 预置模型
    VonMisesMaterial3D,
)

__version__ = '0.1.0'

__all__ = [
    'Material',
    'StressResult',
    'VonMisesMaterialError',
    'MaterialParameterError',
    'IncompressibleMaterialError',
    'PlasticStrainDecreaseError',
    'PlasticState',
    'StateSnapshot',
    'MaterialFactory',
    'IsotropicElastic',
    'VonMises',
    'LinearIsotropicHardening',
    'RadialReturn',
    'VonMisesMaterial3D',
]
