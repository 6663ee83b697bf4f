# 文件: vonmises3d/materials/invariants.py
"""
应力不变量与偏应力

输入均为应力 Voigt 向量 [σxx, σyy, σzz, σxy, σxz, σyz]，无状态纯函数。

剪切约定:
    Voigt 应力向量中存储的就是张量剪切分量 σxy (不是 2σxy)，
    因此下面的公式中剪切项不乘 2:
        J2 = 1/6 [(σxx-σyy)² + (σyy-σzz)² + (σxx-σzz)²] + σxy² + σxz² + σyz²
    等效应力 q = √(3 J2) 只与本模块的 J2 配合使用，
    不要与按其他剪切约定写出的外部公式混用。
"""

import numpy as np

from .interfaces import as_voigt, stress_to_tensor


# 静水部分投影向量 {1,1,1,0,0,0}
HYDROSTATIC = np.array([1.0, 1.0, 1.0, 0.0, 0.0, 0.0])


def first_invariant(stress) -> float:
    """I1 = σxx + σyy + σzz"""
    s = as_voigt(stress, 'stress')
    return float(s[0] + s[1] + s[2])


def mean_stress(stress) -> float:
    """平均 (静水) 应力 I1 / 3"""
    return first_invariant(stress) / 3.0


def second_invariant(stress) -> float:
    """
    I2 = σxx σyy + σyy σzz + σxx σzz - σxy² - σxz² - σyz²
    """
    s = as_voigt(stress, 'stress')
    return float(
        s[0] * s[1] + s[1] * s[2] + s[0] * s[2]
        - s[3] ** 2 - s[4] ** 2 - s[5] ** 2
    )


def third_invariant(stress) -> float:
    """
    I3 = det(σ)
       = σxx σyy σzz + 2 σxy σxz σyz - σxy² σzz - σxz² σyy - σyz² σxx
    """
    s = as_voigt(stress, 'stress')
    return float(
        s[0] * s[1] * s[2] + 2.0 * s[3] * s[4] * s[5]
        - s[3] ** 2 * s[2] - s[4] ** 2 * s[1] - s[5] ** 2 * s[0]
    )


def deviator(stress) -> np.ndarray:
    """
    偏应力 s = σ - (I1/3) {1,1,1,0,0,0}

    Returns:
        s: 新数组 (6,)，不修改输入
    """
    s = as_voigt(stress, 'stress')
    return s - mean_stress(s) * HYDROSTATIC


def deviator_first_invariant(stress) -> float:
    """J1 = tr(s)，恒为 0"""
    return 0.0


def deviator_second_invariant(stress) -> float:
    """J2 (剪切项不乘 2，见模块说明)"""
    s = as_voigt(stress, 'stress')
    j2 = ((s[0] - s[1]) ** 2 + (s[1] - s[2]) ** 2 + (s[0] - s[2]) ** 2) / 6.0
    j2 += s[3] ** 2 + s[4] ** 2 + s[5] ** 2
    return float(j2)


def deviator_third_invariant(stress) -> float:
    """
    J3 = det(s) = (2/27) I1³ - (1/3) I1 I2 + I3

    塑性算法只使用 J2，J3 仅作为工具函数提供。
    """
    i1 = first_invariant(stress)
    i2 = second_invariant(stress)
    i3 = third_invariant(stress)
    return 2.0 / 27.0 * i1 ** 3 - 1.0 / 3.0 * i1 * i2 + i3


def von_mises_stress(stress) -> float:
    """Von Mises 等效应力 q = √(3 J2)"""
    return float(np.sqrt(3.0 * deviator_second_invariant(stress)))


def principal_stresses(stress) -> np.ndarray:
    """
    主应力 (降序)

    Returns:
        (σ1, σ2, σ3): σ1 >= σ2 >= σ3
    """
    return np.linalg.eigvalsh(stress_to_tensor(stress))[::-1].copy()
