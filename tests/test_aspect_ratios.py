import pytest

from priorbox.aspect_ratios import expand_aspect_ratios
from priorbox.errors import DegenerateAspectRatio


def test_unit_ratio_always_first():
    assert expand_aspect_ratios([]) == [1.]
    assert expand_aspect_ratios([2., 3.]) == [1., 2., 3.]

def test_flip_appends_reciprocal_after_each_ratio():
    assert expand_aspect_ratios([2., 3.], flip=True) == pytest.approx([1., 2., .5, 3., 1. / 3.])

def test_duplicates_within_tolerance_are_dropped():
    assert expand_aspect_ratios([1., 2., 2. + 1e-7, 1. - 5e-7]) == [1., 2.]

def test_values_outside_tolerance_are_kept():
    assert len(expand_aspect_ratios([2., 2. + 1e-5])) == 3

def test_flipped_ratio_is_checked_against_reciprocals():
    assert expand_aspect_ratios([2., .5], flip=True) == pytest.approx([1., 2., .5])

def test_reciprocal_is_appended_without_check():
    # 1 / ar lands within tolerance of 1. but is still appended
    expanded = expand_aspect_ratios([1.0000010000005], flip=True)
    assert len(expanded) == 3
    assert abs(expanded[2] - 1.) < 1e-6

def test_order_is_preserved():
    assert expand_aspect_ratios([3., 2.]) == [1., 3., 2.]

@pytest.mark.parametrize('flip', [False, True])
def test_count(flip):
    ratios = [2., 3., 2., 4.]
    unique = 3
    assert len(expand_aspect_ratios(ratios, flip)) == 1 + unique + (unique if flip else 0)

def test_flipped_zero_ratio():
    with pytest.raises(DegenerateAspectRatio):
        expand_aspect_ratios([0.], flip=True)
