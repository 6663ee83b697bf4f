# 文件: vonmises3d/materials/state.py
"""
材料状态管理

- PlasticState: 积分点的一组历史变量 (已收敛值或试探值)
- StateSnapshot: 提交时生成的不可变快照，供外部框架序列化/恢复
"""

from dataclasses import dataclass, field
from typing import Dict, Mapping

import numpy as np

from .exceptions import MaterialParameterError
from .interfaces import as_voigt


# 快照中的标量名称 (与外部框架约定的顺序)
PLASTIC_STRAIN = 'Plastic strain'
STRESS_X = 'Stress X'
STRESS_Y = 'Stress Y'
STRESS_Z = 'Stress Z'
STRESS_XY = 'Stress XY'
STRESS_XZ = 'Stress XZ'
STRESS_YZ = 'Stress YZ'

STATE_KEYS = (PLASTIC_STRAIN, STRESS_X, STRESS_Y, STRESS_Z, STRESS_XY, STRESS_XZ, STRESS_YZ)


@dataclass
class PlasticState:
    """
    塑性材料状态容器

    材料对象内部持有两份: 已收敛 (converged) 和试探 (trial)。
    两者互不共享数组。

    Attributes:
        stress: 应力 Voigt 向量 [σxx, σyy, σzz, σxy, σxz, σyz]
        equivalent_plastic_strain: 累积等效塑性应变 p

    Example:
        state = PlasticState()
        # ... 材料计算 ...
        committed_state = state.copy()  # 收敛后保存
    """

    stress: np.ndarray = field(default_factory=lambda: np.zeros(6))
    equivalent_plastic_strain: float = 0.0

    def copy(self) -> 'PlasticState':
        """
        深拷贝

        Returns:
            PlasticState: 独立的状态副本
        """
        return PlasticState(
            stress=self.stress.copy(),
            equivalent_plastic_strain=self.equivalent_plastic_strain,
        )

    def reset(self) -> None:
        """重置为初始状态"""
        self.stress = np.zeros(6)
        self.equivalent_plastic_strain = 0.0

    def to_snapshot(self) -> 'StateSnapshot':
        return StateSnapshot.from_stress(self.equivalent_plastic_strain, self.stress)

    def __repr__(self) -> str:
        return (
            f"PlasticState(ep={self.equivalent_plastic_strain:.6f}, "
            f"stress_max={np.max(np.abs(self.stress)):.2e})"
        )


@dataclass(frozen=True)
class StateSnapshot:
    """
    不可变状态快照

    由 create_state() 产生，由 restore_from_state() 消费。
    只包含标量，不持有材料对象的引用。
    塑性应变必须是非负有限值。

    Example:
        snapshot = mat.create_state()
        values = snapshot.state_values          # {'Plastic strain': ..., 'Stress X': ..., ...}
        other.restore_from_state(StateSnapshot.from_state_values(values))
    """

    plastic_strain: float = 0.0
    stress_xx: float = 0.0
    stress_yy: float = 0.0
    stress_zz: float = 0.0
    stress_xy: float = 0.0
    stress_xz: float = 0.0
    stress_yz: float = 0.0

    def __post_init__(self):
        if not np.isfinite(self.plastic_strain) or self.plastic_strain < 0.0:
            raise MaterialParameterError(
                f"Plastic strain must be a non-negative finite value, got {self.plastic_strain}"
            )

    @classmethod
    def from_stress(cls, plastic_strain: float, stress) -> 'StateSnapshot':
        """由塑性应变和应力 Voigt 向量构造"""
        s = as_voigt(stress, 'stress')
        return cls(float(plastic_strain), *(float(x) for x in s))

    @classmethod
    def from_state_values(cls, values: Mapping[str, float]) -> 'StateSnapshot':
        """
        由命名标量映射构造

        Raises:
            KeyError: 缺少 STATE_KEYS 中的某个名称
            MaterialParameterError: 塑性应变为负或非有限值
        """
        return cls(*(float(values[key]) for key in STATE_KEYS))

    @property
    def stress(self) -> np.ndarray:
        """应力 Voigt 向量 (新数组)"""
        return np.array([
            self.stress_xx, self.stress_yy, self.stress_zz,
            self.stress_xy, self.stress_xz, self.stress_yz
        ])

    @property
    def state_values(self) -> Dict[str, float]:
        """按 STATE_KEYS 顺序的命名标量"""
        return dict(zip(STATE_KEYS, (self.plastic_strain, *self.stress.tolist())))

    def to_plastic_state(self) -> PlasticState:
        return PlasticState(stress=self.stress, equivalent_plastic_strain=self.plastic_strain)
