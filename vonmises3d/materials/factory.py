# 文件: vonmises3d/materials/factory.py
"""
材料工厂模块

提供统一的材料创建入口。
"""

import logging
from typing import Dict, Any

from .exceptions import MaterialParameterError
from .models.von_mises_3d import VonMisesMaterial3D

LOG = logging.getLogger(__name__)

# 纯弹性材料使用的屈服应力 (实际上永远不会屈服)
ELASTIC_YIELD_STRESS = 1e30


class MaterialFactory:
    """
    材料工厂

    根据材料属性字典创建 VonMisesMaterial3D 对象。
    提供便捷的工厂方法简化常见材料的创建。

    Example:
        # 从属性字典创建
        mat = MaterialFactory.create('Steel', {
            'E': 210000.0,
            'nu': 0.3,
            'plastic': {'yield_stress': 250.0, 'hardening': 1000.0}
        })

        # 使用便捷方法
        mat = MaterialFactory.create_elastic(E=210000.0, nu=0.3)
        mat = MaterialFactory.create_von_mises(E=210000.0, nu=0.3, yield_stress=250.0)
    """

    @staticmethod
    def create(name: str, props: Dict[str, Any]) -> VonMisesMaterial3D:
        """
        根据属性字典创建材料

        Args:
            name: 材料名称 (用于错误消息)
            props: 材料属性字典，结构:
                {
                    'E': float,          # 杨氏模量 (必需)
                    'nu': float,         # 泊松比 (必需)
                    'plastic': {         # 塑性参数 (可选)
                        'yield_stress': float,
                        'hardening': float  # 默认 0
                    }
                }

        Returns:
            VonMisesMaterial3D: 材料对象

        Raises:
            MaterialParameterError: 缺少必需参数或参数非法
        """
        E = props.get('E')
        nu = props.get('nu')

        if E is None or nu is None:
            raise MaterialParameterError(
                f"Material '{name}' missing required parameters. "
                f"Got E={E}, nu={nu}"
            )

        plastic = props.get('plastic')

        if plastic is None:
            LOG.debug("Material '%s' has no plastic section, creating elastic material", name)
            return MaterialFactory.create_elastic(float(E), float(nu))

        yield_stress = plastic.get('yield_stress')
        if yield_stress is None:
            raise MaterialParameterError(
                f"Material '{name}' has plastic section but missing 'yield_stress'"
            )

        return MaterialFactory.create_von_mises(
            E=float(E),
            nu=float(nu),
            yield_stress=float(yield_stress),
            hardening=float(plastic.get('hardening', 0.0))
        )

    @staticmethod
    def create_elastic(E: float, nu: float) -> VonMisesMaterial3D:
        """
        创建纯弹性材料

        Returns:
            VonMisesMaterial3D: 屈服应力为 ELASTIC_YIELD_STRESS
        """
        return VonMisesMaterial3D(E, nu, ELASTIC_YIELD_STRESS)

    @staticmethod
    def create_von_mises(
        E: float,
        nu: float,
        yield_stress: float,
        hardening: float = 0.0
    ) -> VonMisesMaterial3D:
        """
        创建 Von Mises 弹塑性材料

        Args:
            E: 杨氏模量
            nu: 泊松比
            yield_stress: 初始屈服应力
            hardening: 线性硬化模量 (0 表示理想塑性)
        """
        return VonMisesMaterial3D(E, nu, yield_stress, hardening)

    @staticmethod
    def create_perfect_plastic(E: float, nu: float, yield_stress: float) -> VonMisesMaterial3D:
        """创建理想弹塑性材料 (H = 0)"""
        return VonMisesMaterial3D(E, nu, yield_stress, 0.0)
