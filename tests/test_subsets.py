import pytest

from algonotes.subsets import subsets_bitmask, subsets_recursive


@pytest.mark.parametrize("n", range(6))
def test_recursive_count_is_power_of_two(n):
    assert len(subsets_recursive(range(n))) == 2**n


@pytest.mark.parametrize("n", range(6))
def test_bitmask_count_is_power_of_two(n):
    assert len(subsets_bitmask(range(n))) == 2**n


@pytest.mark.parametrize("nums", [[], [7], [1, 2, 3], [4, 9, 2, 5]])
def test_both_methods_produce_same_subsets(nums):
    recursive = sorted(tuple(s) for s in subsets_recursive(nums))
    bitmask = sorted(tuple(s) for s in subsets_bitmask(nums))
    assert recursive == bitmask


@pytest.mark.parametrize("nums", [[1, 2, 3], [5, 6, 7, 8]])
def test_subsets_are_distinct(nums):
    for subsets in (subsets_recursive(nums), subsets_bitmask(nums)):
        assert len({tuple(s) for s in subsets}) == len(subsets)


def test_empty_input_has_only_the_empty_subset():
    assert subsets_recursive([]) == [[]]
    assert subsets_bitmask([]) == [[]]


def test_recursive_order_starts_empty_and_ends_full():
    nums = [3, 1, 4]
    result = subsets_recursive(nums)
    assert result[0] == []
    assert result[1] == [nums[-1]]
    assert result[-1] == nums


def test_bitmask_order_follows_mask_bits():
    nums = [3, 1, 4]
    result = subsets_bitmask(nums)
    assert result[0] == []
    assert result[1] == [nums[0]]
    assert result[2] == [nums[1]]
    assert result[-1] == nums


def test_subsets_keep_input_order():
    nums = [9, 2, 7, 4]
    for subset in subsets_recursive(nums) + subsets_bitmask(nums):
        positions = [nums.index(x) for x in subset]
        assert positions == sorted(positions)


def test_accepts_any_iterable():
    assert subsets_bitmask(iter([1, 2])) == subsets_bitmask([1, 2])
    assert subsets_recursive(x for x in "ab") == subsets_recursive(["a", "b"])