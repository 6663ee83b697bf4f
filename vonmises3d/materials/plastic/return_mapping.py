# 文件: vonmises3d/materials/plastic/return_mapping.py
"""
返回映射算法模块

提供塑性修正算法:
- RadialReturn: 径向返回算法 (J2 塑性 + 线性等向硬化)

扩展指南:
    要添加新的返回映射算法 (如 CPP)，只需创建一个类实现:
    - apply(stress_trial, ep_old) -> StressResult
"""

import logging

import numpy as np

from ..exceptions import PlasticStrainDecreaseError
from ..interfaces import StressResult, as_voigt

LOG = logging.getLogger(__name__)


# 偏应力投影矩阵 (Voigt 6x6)，正应力块 2/3 与 -1/3，剪切块为单位阵
DEVIATORIC_PROJECTOR = np.array([
    [ 2/3, -1/3, -1/3, 0, 0, 0],
    [-1/3,  2/3, -1/3, 0, 0, 0],
    [-1/3, -1/3,  2/3, 0, 0, 0],
    [   0,    0,    0, 1, 0, 0],
    [   0,    0,    0, 0, 1, 0],
    [   0,    0,    0, 0, 0, 1]
], dtype=float)
DEVIATORIC_PROJECTOR.flags.writeable = False


class RadialReturn:
    """
    径向返回算法 (Radial Return Algorithm)

    适用于 J2 (Von Mises) 塑性的经典返回映射算法。
    由于 J2 屈服面在偏应力空间是圆，返回路径为径向（直线），故名径向返回。

    算法步骤:
    1. 检查屈服条件 f = q_trial - σ_y(p)
    2. 若 f <= 0，接受试探应力，切线 = D
    3. 若 f > 0，计算塑性乘子 Δγ = f / (3μ + H)
    4. 修正应力: σ = σ_trial - 2μ Δγ √(3/2) n
    5. 更新状态变量: p_new = p + Δγ
    6. 计算一致切线

    apply() 不修改输入，所有结果按值返回。

    Attributes:
        elastic: 弹性模型 (需提供 mu, D)
        yield_fn: 屈服函数 (需提供 evaluate, equivalent_stress, flow_direction)
        hardening: 硬化规律 (需提供 get_yield_stress, get_hardening_modulus)

    Example:
        return_mapping = RadialReturn(elastic, yield_fn, hardening)
        result = return_mapping.apply(stress_trial, ep_old)
    """

    def __init__(self, elastic, yield_fn, hardening):
        """
        Args:
            elastic: 弹性模型对象
            yield_fn: 屈服函数对象
            hardening: 硬化规律对象
        """
        self.elastic = elastic
        self.yield_fn = yield_fn
        self.hardening = hardening

    def trial_stress(self, stress_old: np.ndarray, incremental_strain: np.ndarray) -> np.ndarray:
        """
        弹性试探应力 σ_trial = σ_old + D @ Δε
        """
        d_eps = as_voigt(incremental_strain, 'incremental_strain')
        return as_voigt(stress_old, 'stress') + self.elastic.D @ d_eps

    def apply(self, stress_trial: np.ndarray, ep_old: float) -> StressResult:
        """
        执行返回映射

        Args:
            stress_trial: 弹性试探应力 (6,)
            ep_old: 已收敛的累积塑性应变

        Returns:
            StressResult: 修正后的应力、一致切线、p_new 和是否塑性

        Raises:
            PlasticStrainDecreaseError: |p_new| < |p_old|
        """
        stress_trial = as_voigt(stress_trial, 'stress_trial')

        # 获取当前屈服应力
        sigma_y = self.hardening.get_yield_stress(ep_old)

        # 检查屈服条件
        f_trial = self.yield_fn.evaluate(stress_trial, sigma_y)

        if f_trial <= 0:
            # 弹性状态：无需修正
            result = StressResult(
                stress=stress_trial,
                tangent=np.array(self.elastic.D, dtype=float),
                plastic_strain=ep_old,
                is_plastic=False,
            )
        else:
            q_trial = self.yield_fn.equivalent_stress(stress_trial)
            result = self._plastic_correction(stress_trial, q_trial, f_trial, ep_old)

        self._check_monotonicity(result.plastic_strain, ep_old)
        return result

    def _plastic_correction(
        self,
        stress_trial: np.ndarray,
        q_trial: float,
        f_trial: float,
        ep_old: float
    ) -> StressResult:
        mu = self.elastic.mu
        H = self.hardening.get_hardening_modulus(ep_old)

        # Δγ = f_trial / (3μ + H)
        d_gamma = f_trial / (3.0 * mu + H)

        n = self.yield_fn.flow_direction(stress_trial)

        # 只修正偏应力部分 (n 的迹为零)
        stress = stress_trial - 2.0 * mu * d_gamma * np.sqrt(1.5) * n

        ep_new = ep_old + d_gamma

        tangent = self._compute_consistent_tangent(n, d_gamma, q_trial, ep_old)

        LOG.debug(
            "Plastic correction: q_trial=%.6e, f=%.6e, d_gamma=%.6e, p_new=%.6e",
            q_trial, f_trial, d_gamma, ep_new
        )

        return StressResult(
            stress=stress,
            tangent=tangent,
            plastic_strain=ep_new,
            is_plastic=True,
        )

    def _compute_consistent_tangent(
        self,
        n: np.ndarray,
        d_gamma: float,
        q_trial: float,
        ep: float
    ) -> np.ndarray:
        """
        计算算法一致切线模量

        D^{alg} = D^e + v1 * P + v2 * (n ⊗ n)

        其中:
        v1 = -6μ² Δγ / q_trial
        v2 = (Δγ / q_trial - 1 / (3μ + H)) * 6μ²
        P  = DEVIATORIC_PROJECTOR

        参考 Souza Neto, Computational Methods for Plasticity, 7.6.6。
        D^e、P、n ⊗ n 都是对称矩阵，所以结果对称。
        """
        mu = self.elastic.mu
        H = self.hardening.get_hardening_modulus(ep)

        v1 = -d_gamma * 6.0 * mu * mu / q_trial
        v2 = (d_gamma / q_trial - 1.0 / (3.0 * mu + H)) * 6.0 * mu * mu

        return self.elastic.D + v1 * DEVIATORIC_PROJECTOR + v2 * np.outer(n, n)

    @staticmethod
    def _check_monotonicity(ep_new: float, ep_old: float) -> None:
        if abs(ep_new) < abs(ep_old):
            LOG.error("Plastic strain decreased from %.6e to %.6e", ep_old, ep_new)
            raise PlasticStrainDecreaseError(
                f"Plastic strain cannot decrease (from {ep_old} to {ep_new})"
            )

    def __repr__(self) -> str:
        return f"RadialReturn(elastic={self.elastic}, yield_fn={self.yield_fn}, hardening={self.hardening})"
