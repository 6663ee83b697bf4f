# 文件: vonmises3d/materials/interfaces.py
"""
材料系统核心接口定义

设计原则:
1. Material: 积分点材料对象的抽象基类，定义统一的增量应力更新接口
2. StressResult: 标准化的应力更新返回值 (按值返回，不共享数组)
3. Protocol: 组件接口，使用鸭子类型实现松耦合

Voigt 记号 (全包统一):
    应力 [σxx, σyy, σzz, σxy, σxz, σyz]
    应变 [εxx, εyy, εzz, γxy, γxz, γyz]  (工程剪应变 γ = 2ε)
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Protocol, Tuple, runtime_checkable
import numpy as np


# 剪切分量在 Voigt 向量中的位置 -> 张量下标
VOIGT_PAIRS = ((0, 0), (1, 1), (2, 2), (0, 1), (0, 2), (1, 2))


@dataclass
class StressResult:
    """
    统一的应力更新结果

    Attributes:
        stress: 应力 Voigt 向量 (6,) [σxx, σyy, σzz, σxy, σxz, σyz]
        tangent: 切线本构矩阵 (6,6)
        plastic_strain: 更新后的累积塑性应变 p_new
        is_plastic: 是否发生塑性流动
    """
    stress: np.ndarray
    tangent: np.ndarray
    plastic_strain: float = 0.0
    is_plastic: bool = False


class Material(ABC):
    """
    积分点材料抽象基类

    每个积分点拥有一个独立的材料对象 (不同对象之间没有共享的可变状态)。
    非线性迭代中反复调用 update_constitutive_response() 得到试探结果，
    收敛后调用 create_state() 提交。

    所有材料都必须实现:
    - update_constitutive_response(): 核心增量应力更新
    - constitutive_matrix: 当前切线本构矩阵
    - create_state() / restore_from_state(): 状态快照的生成与恢复
    - clone(): 独立副本

    Example:
        mat = VonMisesMaterial3D(210000.0, 0.3, 250.0, 1000.0)
        stress = mat.update_constitutive_response(d_eps)
        D = mat.constitutive_matrix
        snapshot = mat.create_state()
    """

    @abstractmethod
    def update_constitutive_response(self, incremental_strain: np.ndarray) -> np.ndarray:
        """
        根据应变增量计算新的应力

        Args:
            incremental_strain: 应变增量 Voigt 向量 (6,)

        Returns:
            stress: 新应力 Voigt 向量 (6,)
        """
        pass

    @property
    @abstractmethod
    def constitutive_matrix(self) -> np.ndarray:
        """当前切线本构矩阵 (6,6)"""
        pass

    @abstractmethod
    def create_state(self):
        """提交试探状态并返回不可变快照"""
        pass

    @abstractmethod
    def restore_from_state(self, snapshot) -> None:
        """将快照写回已收敛状态"""
        pass

    @abstractmethod
    def clone(self) -> 'Material':
        """创建不共享任何可变数组的独立副本"""
        pass


# =============================================================================
# 组件协议 (Protocol for duck typing)
# 使用 Protocol 而非 ABC，允许更灵活的组合
# =============================================================================

@runtime_checkable
class ElasticModel(Protocol):
    """
    弹性模型协议

    任何实现了以下成员的类都可以作为弹性模型使用:
    - mu: 剪切模量
    - lam: Lamé 第一参数
    - D: 弹性矩阵
    - compute_stress(): 计算弹性应力
    """

    @property
    def mu(self) -> float:
        """剪切模量 μ"""
        ...

    @property
    def lam(self) -> float:
        """Lamé 第一参数 λ"""
        ...

    @property
    def D(self) -> np.ndarray:
        """弹性矩阵 (6,6)"""
        ...

    def compute_stress(self, strain_voigt: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
        """
        计算弹性应力

        Args:
            strain_voigt: 应变 Voigt 向量 (6,)

        Returns:
            (stress, tangent): 应力向量和切线模量
        """
        ...


@runtime_checkable
class YieldFunction(Protocol):
    """
    屈服函数协议

    - evaluate(): 屈服函数值
    - equivalent_stress(): 等效应力
    - flow_direction(): 单位流动方向
    """

    def evaluate(self, stress: np.ndarray, yield_stress: float) -> float:
        """
        计算屈服函数值

        Args:
            stress: 应力 Voigt 向量 (6,)
            yield_stress: 当前屈服应力

        Returns:
            f: 屈服函数值 (f <= 0 表示弹性，f > 0 表示需要返回)
        """
        ...

    def equivalent_stress(self, stress: np.ndarray) -> float:
        ...

    def flow_direction(self, stress: np.ndarray) -> np.ndarray:
        """
        计算单位流动方向

        Args:
            stress: 应力 Voigt 向量 (6,)

        Returns:
            n: 流动方向向量 (6,)
        """
        ...


@runtime_checkable
class HardeningLaw(Protocol):
    """
    硬化律协议

    - get_yield_stress(): 获取当前屈服应力
    - get_hardening_modulus(): 获取硬化模量
    """

    def get_yield_stress(self, ep: float) -> float:
        """
        获取当前屈服应力

        Args:
            ep: 累积等效塑性应变

        Returns:
            σ_y: 当前屈服应力
        """
        ...

    def get_hardening_modulus(self, ep: float) -> float:
        """
        获取硬化模量

        Args:
            ep: 累积等效塑性应变

        Returns:
            H: 硬化模量 dσ_y/dε_p
        """
        ...


# =============================================================================
# 辅助函数
# =============================================================================

def as_voigt(v, name: str = 'vector') -> np.ndarray:
    """
    转换为独立的 float64 Voigt 向量 (6,)

    Raises:
        ValueError: 长度不是 6
    """
    arr = np.array(v, dtype=float).reshape(-1)
    if arr.shape != (6,):
        raise ValueError(f"{name} must have 6 Voigt components, got shape {np.shape(v)}")
    return arr


def stress_to_tensor(s: np.ndarray) -> np.ndarray:
    """将应力 Voigt 向量转换为 3x3 对称张量 (剪切分量即张量分量，不需要因子)"""
    s = as_voigt(s, 'stress')
    T = np.zeros((3, 3))
    for k, (i, j) in enumerate(VOIGT_PAIRS):
        T[i, j] = T[j, i] = s[k]
    return T


def tensor_to_stress(T: np.ndarray) -> np.ndarray:
    """将 3x3 应力张量转换为 Voigt 向量"""
    T = np.asarray(T, dtype=float)
    return np.array([T[i, j] for i, j in VOIGT_PAIRS])
