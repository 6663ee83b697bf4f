# 文件: vonmises3d/materials/plastic/hardening.py
"""
硬化规律模块

- LinearIsotropicHardening: 线性等向硬化 (H = 0 时即理想塑性)

扩展指南:
    要添加新的硬化模型，只需创建一个类实现以下方法:
    - get_yield_stress(ep) -> float
    - get_hardening_modulus(ep) -> float
"""

from ..exceptions import MaterialParameterError


class LinearIsotropicHardening:
    """
    线性等向硬化

    屈服应力随等效塑性应变线性增加:
    σ_y = σ_y0 + H * ε_p

    Example:
        hardening = LinearIsotropicHardening(yield_stress=250.0, H=1000.0)
        sigma_y = hardening.get_yield_stress(ep=0.05)  # 返回 300.0
    """

    def __init__(self, yield_stress: float, H: float = 0.0):
        """
        Args:
            yield_stress: 初始屈服应力 σ_y0 (> 0)
            H: 硬化模量 (>= 0, 0 表示理想塑性)
        """
        if yield_stress <= 0:
            raise MaterialParameterError(f"Yield stress must be positive, got {yield_stress}")
        if H < 0:
            raise MaterialParameterError(f"Hardening modulus must be non-negative, got {H}")

        self.yield_stress = float(yield_stress)
        self.H = float(H)

    def get_yield_stress(self, ep: float) -> float:
        """
        获取当前屈服应力

        Args:
            ep: 累积等效塑性应变

        Returns:
            σ_y: 当前屈服应力 = σ_y0 + H * ε_p
        """
        return self.yield_stress + self.H * ep

    def get_hardening_modulus(self, ep: float) -> float:
        """硬化模量 (线性硬化为常数)"""
        return self.H

    def __repr__(self) -> str:
        return f"LinearIsotropicHardening(σ_y={self.yield_stress:.2e}, H={self.H:.2e})"
