# 文件: vonmises3d/materials/elastic/isotropic.py
"""
各向同性弹性模型

提供:
- IsotropicElastic: 各向同性线弹性 (Hooke's Law)
"""

import logging

import numpy as np
from typing import Tuple

from ..exceptions import IncompressibleMaterialError, MaterialParameterError
from ..interfaces import as_voigt

LOG = logging.getLogger(__name__)

# 不可压缩固体的泊松比
POISSON_RATIO_INCOMPRESSIBLE = 0.5


class IsotropicElastic:
    """
    各向同性线弹性模型 (Hooke's Law)

    本构关系: σ = D : ε

    弹性矩阵 D 为 6x6 矩阵，使用 Voigt 记号:
    [σxx, σyy, σzz, σxy, σxz, σyz]^T = D @ [εxx, εyy, εzz, γxy, γxz, γyz]^T

    Attributes:
        E: 杨氏模量
        nu: 泊松比
        mu: 剪切模量 μ = E / (2(1+ν))
        lam: Lamé 第一参数 λ = Eν / ((1+ν)(1-2ν))
        K: 体积模量 K = λ + 2μ/3
        D: 弹性矩阵 (6,6)

    Example:
        elastic = IsotropicElastic(E=210000.0, nu=0.3)
        stress, tangent = elastic.compute_stress(strain_voigt)
    """

    def __init__(self, E: float, nu: float):
        """
        初始化各向同性弹性模型

        Args:
            E: 杨氏模量 (Young's modulus), E > 0
            nu: 泊松比 (Poisson's ratio), ν > -1 且 ν != 0.5

        Raises:
            IncompressibleMaterialError: ν == 0.5
            MaterialParameterError: E <= 0 或 ν <= -1
        """
        if nu == POISSON_RATIO_INCOMPRESSIBLE:
            raise IncompressibleMaterialError(
                f"Poisson ratio cannot be {POISSON_RATIO_INCOMPRESSIBLE} (incompressible solid)"
            )
        if E <= 0:
            raise MaterialParameterError(f"Young's modulus must be positive, got {E}")
        if nu <= -1.0:
            raise MaterialParameterError(f"Poisson's ratio must be greater than -1, got {nu}")
        if nu > POISSON_RATIO_INCOMPRESSIBLE:
            LOG.warning("Poisson's ratio %g > 0.5: elastic matrix is not positive definite", nu)

        self.E = float(E)
        self.nu = float(nu)

        # 计算导出参数
        self._mu = self.E / (2 * (1 + self.nu))
        self._lam = self.E * self.nu / ((1 + self.nu) * (1 - 2 * self.nu))
        self._K = self._lam + 2.0 * self._mu / 3.0

        # 预计算弹性矩阵 (只读)
        self._D = self._build_D_matrix()
        self._D.flags.writeable = False

    @property
    def mu(self) -> float:
        """剪切模量 μ"""
        return self._mu

    @property
    def lam(self) -> float:
        """Lamé 第一参数 λ"""
        return self._lam

    @property
    def K(self) -> float:
        """体积模量 K"""
        return self._K

    @property
    def D(self) -> np.ndarray:
        """弹性矩阵 (6,6)，只读视图"""
        return self._D

    def compute_stress(self, strain_voigt: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
        """
        计算弹性应力

        Args:
            strain_voigt: 工程应变 Voigt 向量 (6,)
                         [εxx, εyy, εzz, γxy, γxz, γyz]

        Returns:
            stress: 应力 Voigt 向量 (6,)
            tangent: 切线模量 (6,6)，对于弹性材料等于 D
        """
        stress = self._D @ as_voigt(strain_voigt, 'strain')
        return stress, self._D.copy()

    def _build_D_matrix(self) -> np.ndarray:
        """
        构建 6x6 弹性矩阵

        矩阵形式:
        | λ+2μ  λ     λ     0  0  0 |
        | λ     λ+2μ  λ     0  0  0 |
        | λ     λ     λ+2μ  0  0  0 |
        | 0     0     0     μ  0  0 |
        | 0     0     0     0  μ  0 |
        | 0     0     0     0  0  μ |

        剪切块为 μ (工程剪应变，不乘 2)
        """
        lam, mu = self._lam, self._mu

        D = np.zeros((6, 6))

        # 正应力-正应变耦合
        D[:3, :3] = lam
        D[0, 0] = D[1, 1] = D[2, 2] = lam + 2 * mu

        # 剪切应力-剪切应变
        D[3, 3] = D[4, 4] = D[5, 5] = mu

        return D

    def __repr__(self) -> str:
        return f"IsotropicElastic(E={self.E:.2e}, nu={self.nu:.3f})"
