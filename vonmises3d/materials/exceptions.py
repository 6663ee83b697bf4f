# 文件: vonmises3d/materials/exceptions.py
"""
材料系统异常定义

层次结构:
    VonMisesMaterialError
    ├── MaterialParameterError (同时是 ValueError)
    │   └── IncompressibleMaterialError
    └── PlasticStrainDecreaseError (同时是 RuntimeError)

捕获 VonMisesMaterialError 即可处理本包抛出的所有错误。
"""


class VonMisesMaterialError(Exception):
    """材料系统所有异常的基类"""
    pass


class MaterialParameterError(VonMisesMaterialError, ValueError):
    """
    材料参数非法

    在以下情况抛出:
    - 杨氏模量 E <= 0
    - 泊松比 ν <= -1
    - 屈服应力 σ_y <= 0
    - 硬化模量 H < 0
    - 属性字典缺少必需参数
    - 状态快照中的塑性应变为负或非有限值
    """
    pass


class IncompressibleMaterialError(MaterialParameterError):
    """
    泊松比等于 0.5 (不可压缩固体)

    此时 λ 的分母 (1-2ν) 为零，弹性矩阵奇异，材料对象不能被创建。
    """
    pass


class PlasticStrainDecreaseError(VonMisesMaterialError, RuntimeError):
    """
    累积塑性应变减小

    塑性不可逆: 应力更新后 |p_new| < |p| 说明应变历史被误用或算法有缺陷。
    该错误不可恢复，调用方不应重试。
    """
    pass
