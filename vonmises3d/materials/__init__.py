# 文件: vonmises3d/materials/__init__.py
"""
vonmises3d 材料系统

分层架构:
- interfaces.py: 抽象基类、协议和 Voigt 辅助函数
- invariants.py: 应力不变量与偏应力
- state.py: 材料状态与快照
- exceptions.py: 异常定义
- elastic/: 弹性模型组件
- plastic/: 塑性模型组件 (屈服函数、硬化规律、返回映射)
- models/: 预置材料模型
- factory.py: 材料工厂

使用方法:
    from vonmises3d.materials import VonMisesMaterial3D

    mat = VonMisesMaterial3D(210000.0, 0.3, 250.0, 1000.0)

    # 非线性迭代: 应变增量 -> 应力和切线
    stress = mat.update_constitutive_response(d_eps)
    tangent = mat.constitutive_matrix
    print(mat.is_modified())   # 是否塑性

    # 收敛后提交，得到快照
    snapshot = mat.create_state()

    # 放弃当前荷载步
    mat.restore_from_state(snapshot)

Voigt 顺序: [xx, yy, zz, xy, xz, yz]，应变剪切分量为工程剪应变。
"""

# 核心接口
from .interfaces import (
    Material,
    StressResult,
    ElasticModel,
    YieldFunction,
    HardeningLaw,
    stress_to_tensor,
    tensor_to_stress,
)

# 异常
from .exceptions import (
    VonMisesMaterialError,
    MaterialParameterError,
    IncompressibleMaterialError,
    PlasticStrainDecreaseError,
)

# 不变量
from .invariants import (
    first_invariant,
    mean_stress,
    second_invariant,
    third_invariant,
    deviator,
    deviator_first_invariant,
    deviator_second_invariant,
    deviator_third_invariant,
    von_mises_stress,
    principal_stresses,
)

# 状态管理
from .state import PlasticState, StateSnapshot, STATE_KEYS

# 工厂
from .factory import MaterialFactory

# 弹性组件
from .elastic import IsotropicElastic

# 塑性组件
from .plastic import (
    VonMises,
    LinearIsotropicHardening,
    RadialReturn,
    DEVIATORIC_PROJECTOR,
)

# 预置模型
from .models import VonMisesMaterial3D


__all__ = [
    # 核心接口
    'Material',
    'StressResult',
    'ElasticModel',
    'YieldFunction',
    'HardeningLaw',

    # 辅助函数
    'stress_to_tensor',
    'tensor_to_stress',

    # 异常
    'VonMisesMaterialError',
    'MaterialParameterError',
    'IncompressibleMaterialError',
    'PlasticStrainDecreaseError',

    # 不变量
    'first_invariant',
    'mean_stress',
    'second_invariant',
    'third_invariant',
    'deviator',
    'deviator_first_invariant',
    'deviator_second_invariant',
    'deviator_third_invariant',
    'von_mises_stress',
    'principal_stresses',

    # 状态
    'PlasticState',
    'StateSnapshot',
    'STATE_KEYS',

    # 工厂
    'MaterialFactory',

    # 弹性组件
    'IsotropicElastic',

    # 塑性组件
    'VonMises',
    'LinearIsotropicHardening',
    'RadialReturn',
    'DEVIATORIC_PROJECTOR',

    # 预置模型
    'VonMisesMaterial3D',
]
