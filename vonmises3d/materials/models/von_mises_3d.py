# 文件: vonmises3d/materials/models/von_mises_3d.py
"""
三维 Von Mises 弹塑性材料模型

使用组合模式将弹性模型、屈服函数、硬化规律和返回映射算法组合成
一个积分点材料对象。
"""

import logging
from collections.abc import Mapping
from typing import Union

import numpy as np

from ..interfaces import Material, as_voigt
from ..state import PlasticState, StateSnapshot
from ..elastic.isotropic import IsotropicElastic
from ..plastic.yield_functions import VonMises
from ..plastic.hardening import LinearIsotropicHardening
from ..plastic.return_mapping import RadialReturn

LOG = logging.getLogger(__name__)


class VonMisesMaterial3D(Material):
    """
    三维 Von Mises 弹塑性材料 (组合式实现)

    将各组件组合成完整的材料模型:
    - 弹性: IsotropicElastic
    - 屈服: VonMises
    - 硬化: LinearIsotropicHardening (hardening_modulus=0 即理想塑性)
    - 返回映射: RadialReturn

    对象内部持有两组值:
    - 已收敛值: 上一次提交 (create_state / save_state) 时的应力和塑性应变
    - 试探值: 最近一次 update_constitutive_response() 的结果
    每次更新都以已收敛值为起点，试探值整体替换，不会累积。

    Attributes:
        elastic: 弹性组件
        yield_fn: 屈服函数组件
        hardening: 硬化组件
        return_mapping: 返回映射组件

    Example:
        mat = VonMisesMaterial3D(210000.0, 0.3, 250.0, 1000.0)

        # 非线性迭代
        stress = mat.update_constitutive_response(d_eps)
        D = mat.constitutive_matrix

        # 收敛后提交
        snapshot = mat.create_state()
    """

    def __init__(
        self,
        young_modulus: float,
        poisson_ratio: float,
        yield_stress: float,
        hardening_modulus: float = 0.0
    ):
        """
        初始化 Von Mises 弹塑性材料

        Args:
            young_modulus: 杨氏模量 E
            poisson_ratio: 泊松比 ν (不能等于 0.5)
            yield_stress: 初始屈服应力 σ_y0
            hardening_modulus: 线性硬化模量 H (0 表示理想塑性)

        Raises:
            IncompressibleMaterialError: ν == 0.5
            MaterialParameterError: 其他非法参数
        """
        # 创建组件 (参数校验在组件中完成)
        self.elastic = IsotropicElastic(young_modulus, poisson_ratio)
        self.yield_fn = VonMises()
        self.hardening = LinearIsotropicHardening(yield_stress, hardening_modulus)
        self.return_mapping = RadialReturn(self.elastic, self.yield_fn, self.hardening)

        # 可变状态
        self._converged = PlasticState()
        self._trial = PlasticState()
        self._incremental_strains = np.zeros(6)
        self._tangent = None
        self._modified = False
        self._current_state = StateSnapshot()

    # ------------------------------------------------------------------
    # 参数
    # ------------------------------------------------------------------

    @property
    def young_modulus(self) -> float:
        return self.elastic.E

    @property
    def poisson_ratio(self) -> float:
        return self.elastic.nu

    @property
    def yield_stress(self) -> float:
        """初始屈服应力"""
        return self.hardening.yield_stress

    @property
    def hardening_modulus(self) -> float:
        return self.hardening.H

    @property
    def shear_modulus(self) -> float:
        return self.elastic.mu

    @property
    def elastic_constitutive_matrix(self) -> np.ndarray:
        """弹性矩阵 D (副本)"""
        return np.array(self.elastic.D, dtype=float)

    # ------------------------------------------------------------------
    # 应力更新
    # ------------------------------------------------------------------

    def update_constitutive_response(self, incremental_strain: np.ndarray) -> np.ndarray:
        """
        根据应变增量更新试探状态

        算法流程:
        1. 弹性试探应力 σ_trial = σ_converged + D @ Δε
        2. 径向返回 (若需要)
        3. 保存试探应力、试探塑性应变和切线矩阵

        Args:
            incremental_strain: 相对于已收敛状态的应变增量 (6,)
                                [εxx, εyy, εzz, γxy, γxz, γyz]

        Returns:
            stress: 新应力 (6,)

        Raises:
            PlasticStrainDecreaseError: 塑性应变减小 (不可恢复)
        """
        d_eps = as_voigt(incremental_strain, 'incremental_strain')
        ep_old = self._converged.equivalent_plastic_strain

        stress_trial = self.return_mapping.trial_stress(self._converged.stress, d_eps)
        result = self.return_mapping.apply(stress_trial, ep_old)

        self._incremental_strains = d_eps
        self._trial = PlasticState(
            stress=result.stress,
            equivalent_plastic_strain=result.plastic_strain
        )
        self._tangent = result.tangent
        self._modified = result.plastic_strain != ep_old

        return result.stress.copy()

    @property
    def constitutive_matrix(self) -> np.ndarray:
        """
        当前切线本构矩阵 (6,6)

        尚未计算过时，以零应变增量求值一次得到。
        """
        if self._tangent is None:
            LOG.debug("Building constitutive matrix from a zero-strain evaluation")
            self.update_constitutive_response(np.zeros(6))
        return self._tangent.copy()

    @property
    def stresses(self) -> np.ndarray:
        """试探 (新) 应力"""
        return self._trial.stress.copy()

    @property
    def incremental_strains(self) -> np.ndarray:
        return self._incremental_strains.copy()

    @property
    def plastic_strain(self) -> float:
        """已收敛的累积塑性应变 p"""
        return self._converged.equivalent_plastic_strain

    @property
    def trial_plastic_strain(self) -> float:
        """试探累积塑性应变 p_new"""
        return self._trial.equivalent_plastic_strain

    @property
    def converged_stresses(self) -> np.ndarray:
        return self._converged.stress.copy()

    def is_modified(self) -> bool:
        """最近一次更新是否发生塑性流动"""
        return self._modified

    def reset_modified(self) -> None:
        self._modified = False

    # ------------------------------------------------------------------
    # 状态管理
    # ------------------------------------------------------------------

    def clear_stresses(self) -> None:
        """清零已收敛和试探应力 (保留塑性应变)"""
        self._converged.stress = np.zeros(6)
        self._trial.stress = np.zeros(6)

    def clear_state(self) -> None:
        """
        清零所有可变状态

        参数不变。切线矩阵被丢弃，下次访问 constitutive_matrix 时重新计算。
        """
        self._modified = False
        self._tangent = None
        self._incremental_strains = np.zeros(6)
        self._converged.reset()
        self._trial.reset()
        self._current_state = StateSnapshot()

    def save_state(self) -> None:
        """提交: 试探值 -> 已收敛值"""
        self._converged = self._trial.copy()
        LOG.debug("State saved: %r", self._converged)

    def create_state(self) -> StateSnapshot:
        """
        提交并生成快照

        Returns:
            StateSnapshot: {塑性应变, σxx, σyy, σzz, σxy, σxz, σyz}
        """
        self.save_state()
        self._current_state = self._converged.to_snapshot()
        return self._current_state

    def restore_from_state(self, snapshot: Union[StateSnapshot, Mapping[str, float]]) -> None:
        """
        将快照写回已收敛值

        Args:
            snapshot: StateSnapshot 或以 STATE_KEYS 为键的映射

        Raises:
            TypeError: snapshot 类型不支持
            MaterialParameterError: 映射中的塑性应变为负或非有限值
        """
        if isinstance(snapshot, Mapping):
            snapshot = StateSnapshot.from_state_values(snapshot)
        elif not isinstance(snapshot, StateSnapshot):
            raise TypeError(f"Expected StateSnapshot or mapping, got {type(snapshot).__name__}")

        self._converged = snapshot.to_plastic_state()
        self._current_state = snapshot
        LOG.debug("State restored: %r", self._converged)

    @property
    def current_state(self) -> StateSnapshot:
        """最近一次生成或恢复的快照"""
        return self._current_state

    @current_state.setter
    def current_state(self, snapshot: StateSnapshot) -> None:
        self.restore_from_state(snapshot)

    def clone(self) -> 'VonMisesMaterial3D':
        """
        创建独立副本

        以相同参数重新构造 (弹性矩阵重新计算)，再复制全部可变状态。
        """
        other = VonMisesMaterial3D(
            self.young_modulus,
            self.poisson_ratio,
            self.yield_stress,
            self.hardening_modulus
        )
        other._converged = self._converged.copy()
        other._trial = self._trial.copy()
        other._incremental_strains = self._incremental_strains.copy()
        other._tangent = None if self._tangent is None else self._tangent.copy()
        other._modified = self._modified
        other._current_state = self._current_state
        return other

    def __repr__(self) -> str:
        return (
            f"VonMisesMaterial3D(E={self.young_modulus:.2e}, nu={self.poisson_ratio:.3f}, "
            f"σ_y={self.yield_stress:.2e}, H={self.hardening_modulus:.2e})"
        )
