"""
应力不变量单元测试
"""

import numpy as np
import pytest

from vonmises3d.materials import (
    first_invariant,
    mean_stress,
    second_invariant,
    third_invariant,
    deviator,
    deviator_first_invariant,
    deviator_second_invariant,
    deviator_third_invariant,
    von_mises_stress,
    principal_stresses,
    stress_to_tensor,
)


STRESS_SAMPLES = [
    np.array([300.0, -100.0, 50.0, 10.0, 20.0, 30.0]),
    np.array([1e9, 1e9, 1e9, 0.0, 0.0, 0.0]),
    np.array([0.0, 0.0, 0.0, 0.0, 0.0, 150.0]),
    np.array([-42.0, 17.5, 3.25, -8.0, 0.5, 12.0]),
]


class TestStressInvariants:
    """测试应力张量不变量"""

    def test_first_invariant_and_mean(self):
        stress = np.array([300.0, -100.0, 50.0, 10.0, 20.0, 30.0])
        assert first_invariant(stress) == pytest.approx(250.0)
        assert mean_stress(stress) == pytest.approx(250.0 / 3.0)

    @pytest.mark.parametrize('stress', STRESS_SAMPLES)
    def test_second_invariant_matches_tensor(self, stress):
        """I2 = 1/2 [tr(σ)² - tr(σ·σ)]"""
        S = stress_to_tensor(stress)
        expected = 0.5 * (np.trace(S) ** 2 - np.trace(S @ S))
        assert np.isclose(second_invariant(stress), expected, rtol=1e-12, atol=1e-9)

    @pytest.mark.parametrize('stress', STRESS_SAMPLES)
    def test_third_invariant_is_determinant(self, stress):
        S = stress_to_tensor(stress)
        assert np.isclose(third_invariant(stress), np.linalg.det(S), rtol=1e-9, atol=1e-6)

    def test_wrong_length_rejected(self):
        with pytest.raises(ValueError):
            first_invariant(np.zeros(3))


class TestDeviator:
    """测试偏应力及其不变量"""

    @pytest.mark.parametrize('stress', STRESS_SAMPLES)
    def test_deviator_idempotent(self, stress):
        s = deviator(stress)
        assert np.allclose(deviator(s), s, rtol=1e-12, atol=1e-6)

    @pytest.mark.parametrize('stress', STRESS_SAMPLES)
    def test_first_invariant_of_deviator_is_zero(self, stress):
        s = deviator(stress)
        assert abs(first_invariant(s)) <= 1e-12 * max(1.0, np.max(np.abs(stress)))
        assert deviator_first_invariant(stress) == 0.0

    def test_deviator_keeps_shear(self):
        stress = np.array([300.0, -100.0, 50.0, 10.0, 20.0, 30.0])
        s = deviator(stress)
        assert np.array_equal(s[3:], stress[3:])

    def test_deviator_does_not_modify_input(self):
        stress = np.array([300.0, -100.0, 50.0, 10.0, 20.0, 30.0])
        original = stress.copy()
        deviator(stress)
        assert np.array_equal(stress, original)

    @pytest.mark.parametrize('stress', STRESS_SAMPLES)
    def test_j2_matches_tensor(self, stress):
        """J2 = 1/2 s:s (张量形式，剪切分量计两次)"""
        s_tensor = stress_to_tensor(deviator(stress))
        expected = 0.5 * np.sum(s_tensor * s_tensor)
        assert np.isclose(deviator_second_invariant(stress), expected, rtol=1e-12, atol=1e-6)

    @pytest.mark.parametrize('stress', STRESS_SAMPLES[:1] + STRESS_SAMPLES[2:])
    def test_j3_is_determinant_of_deviator(self, stress):
        s_tensor = stress_to_tensor(deviator(stress))
        assert np.isclose(deviator_third_invariant(stress), np.linalg.det(s_tensor), rtol=1e-9, atol=1e-6)

    def test_hydrostatic_stress_has_no_deviator(self):
        stress = np.array([1e9, 1e9, 1e9, 0.0, 0.0, 0.0])
        assert deviator_second_invariant(stress) == 0.0
        assert von_mises_stress(stress) == 0.0


class TestVonMisesStress:
    """测试等效应力"""

    def test_uniaxial(self):
        stress = np.array([300.0, 0, 0, 0, 0, 0])
        assert np.isclose(von_mises_stress(stress), 300.0, rtol=1e-12)

    def test_pure_shear(self):
        """纯剪切 σ_eq = √3 τ"""
        for k in (3, 4, 5):
            stress = np.zeros(6)
            stress[k] = 150.0
            assert np.isclose(von_mises_stress(stress), np.sqrt(3) * 150.0, rtol=1e-12)

    def test_principal_stresses(self):
        stress = np.array([50.0, 300.0, -100.0, 0, 0, 0])
        assert np.allclose(principal_stresses(stress), [300.0, 50.0, -100.0])

    def test_von_mises_from_principal_stresses(self):
        stress = np.array([300.0, -100.0, 50.0, 10.0, 20.0, 30.0])
        s1, s2, s3 = principal_stresses(stress)
        expected = np.sqrt(0.5 * ((s1 - s2) ** 2 + (s2 - s3) ** 2 + (s1 - s3) ** 2))
        assert np.isclose(von_mises_stress(stress), expected, rtol=1e-10)
