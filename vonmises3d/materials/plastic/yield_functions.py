# 文件: vonmises3d/materials/plastic/yield_functions.py
"""
屈服函数模块

提供:
- VonMises: Von Mises (J2) 屈服准则

扩展指南:
    要添加新的屈服函数，只需创建一个类实现以下方法:
    - evaluate(stress, yield_stress) -> float
    - equivalent_stress(stress) -> float
    - flow_direction(stress) -> np.ndarray (6,)
"""

import numpy as np

from .. import invariants


class VonMises:
    """
    Von Mises (J2) 屈服准则

    屈服函数: f = q - σ_y
    其中 q = √(3 * J2)

    适用于金属材料的等向屈服。J2 的剪切约定见 invariants 模块。

    Example:
        yield_fn = VonMises()
        f = yield_fn.evaluate(stress, yield_stress=250.0)
        if f > 0:
            n = yield_fn.flow_direction(stress)
    """

    def evaluate(self, stress: np.ndarray, yield_stress: float) -> float:
        """
        计算屈服函数值

        Args:
            stress: 应力 Voigt 向量 (6,) [σxx, σyy, σzz, σxy, σxz, σyz]
            yield_stress: 当前屈服应力 σ_y

        Returns:
            f: 屈服函数值
               f <= 0: 弹性状态
               f > 0: 需要塑性修正
        """
        return self.equivalent_stress(stress) - yield_stress

    def equivalent_stress(self, stress: np.ndarray) -> float:
        """Von Mises 等效应力 q = √(3 J2)"""
        return invariants.von_mises_stress(stress)

    def flow_direction(self, stress: np.ndarray) -> np.ndarray:
        """
        单位偏应力方向

        n = s * √(1 / (2 J2))

        即 s / ||s||，与径向返回公式 σ = σ_trial - 2μ Δγ √(3/2) n 配套。

        Args:
            stress: 应力 Voigt 向量 (6,)

        Returns:
            n: 流动方向 (6,)，J2 == 0 时返回零向量
        """
        s = invariants.deviator(stress)
        j2 = invariants.deviator_second_invariant(stress)
        if j2 <= 0.0:
            return np.zeros(6)
        return s * np.sqrt(1.0 / (2.0 * j2))

    def __repr__(self) -> str:
        return "VonMises()"
