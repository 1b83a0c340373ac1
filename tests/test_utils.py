import pytest

from cfgdraw import utils


def test_u256_to_hex_pads_to_two_digits():
    assert utils.u256_to_hex(5) == "0x05"
    assert utils.u256_to_hex(255) == "0xff"


def test_u256_to_hex_rejects_out_of_range():
    with pytest.raises(ValueError):
        utils.u256_to_hex(1 << 256)
    with pytest.raises(ValueError):
        utils.u256_to_hex(-1)


def test_remove_0x():
    assert utils.remove_0x("0xabc") == "abc"
    assert utils.remove_0x("abc") == "abc"
    assert utils.remove_0x("0") == "0"


@pytest.mark.parametrize("n", [0, 1, 15, 16, 301, 2**64 + 7])
def test_hex_round_trip(n):
    assert utils.hex_to_int(utils.int_to_hex(n)) == n


def test_hex_to_int_accepts_missing_prefix():
    assert utils.hex_to_int("12d") == utils.hex_to_int("0x12d")


@pytest.mark.parametrize("bad", ["", "0x", "xyz", "0x0x1", "1_0", " ff"])
def test_hex_to_int_rejects_garbage(bad):
    with pytest.raises(ValueError):
        utils.hex_to_int(bad)


def test_int_to_hex_rejects_negative():
    with pytest.raises(ValueError):
        utils.int_to_hex(-3)


def test_remove_value():
    values = [4, 7, 9]
    utils.remove_value(values, 7)
    assert values == [4, 9]


def test_remove_value_missing_raises():
    with pytest.raises(ValueError):
        utils.remove_value([1, 2], 3)


def test_remove_value_duplicate_raises():
    with pytest.raises(ValueError):
        utils.remove_value([1, 2, 1], 1)


def test_get_sorted_keys():
    assert utils.get_sorted_keys({3: "c", 1: "a", 2: "b"}) == [1, 2, 3]


def test_max_mapped_value():
    assert utils.max_mapped_value(["aa", "b", "cccc"], len) == len("cccc")
    assert utils.max_mapped_value([], len) is None


def test_map_values_to_index_last_wins():
    mapping = utils.map_values_to_index(["a", "b", "a"])
    assert mapping == {"a": 2, "b": 1}


def test_iter_int_ascending():
    values = list(utils.iter_int(2, 5))
    assert values[0] == 2
    assert 5 not in values
    assert len(values) == 5 - 2
    assert all(b - a == 1 for a, b in zip(values, values[1:]))


def test_iter_int_descending():
    values = list(utils.iter_int(5, 2))
    assert values[0] == 5
    assert 2 not in values
    assert len(values) == 5 - 2
    assert all(a - b == 1 for a, b in zip(values, values[1:]))


def test_iter_int_equal_is_empty():
    assert list(utils.iter_int(4, 4)) == []


def test_get_max_key():
    assert utils.get_max_key({1: "x", 9: "y", 4: "z"}) == 9
    assert utils.get_max_key({}) is None


def test_random_u8_in_range():
    for _ in range(200):
        value = utils.random_u8(50, 200)
        assert 50 <= value < 200


def test_random_u8_empty_range_raises():
    with pytest.raises(ValueError):
        utils.random_u8(10, 10)


def test_hash_set_ignores_order():
    assert utils.hash_set({1, 2, 3}) == utils.hash_set([3, 1, 2])


def test_is_empty_iter():
    assert utils.is_empty_iter(iter([]))
    assert not utils.is_empty_iter(x for x in [0])


def test_write_then_read(tmp_path):
    path = tmp_path / "data.txt"
    assert not utils.file_exists(path)
    utils.write_file(path, "hello\nworld")
    assert utils.file_exists(path)
    assert utils.read_file(path) == "hello\nworld"


def test_read_missing_file_raises(tmp_path):
    with pytest.raises(OSError):
        utils.read_file(tmp_path / "missing.txt")


def test_find_files(tmp_path):
    (tmp_path / "a").mkdir()
    (tmp_path / "a" / "bytecode.txt").write_text("x")
    (tmp_path / "b").mkdir()
    (tmp_path / "b" / "bytecode.txt").write_text("y")
    (tmp_path / "b" / "other.txt").write_text("z")
    found = utils.find_files(tmp_path, lambda name: name == "bytecode.txt")
    assert sorted(found) == sorted(
        [str(tmp_path / "a" / "bytecode.txt"), str(tmp_path / "b" / "bytecode.txt")]
    )


def test_find_files_includes_root(tmp_path):
    root = tmp_path / "contracts"
    root.mkdir()
    assert utils.find_files(root, lambda name: name == "contracts") == [str(root)]


def test_find_files_missing_directory(tmp_path):
    assert utils.find_files(tmp_path / "nope", lambda name: True) == []


def test_shift_text():
    assert utils.shift_text("a\nb") == "    a\n    b\n"


def test_concat_to_str():
    assert utils.concat_to_str([1, 2, 3], ", ") == "1, 2, 3"


def test_rename_keys_keeps_missing():
    renamed = utils.rename_keys({"a": 1, "b": 2}, {"a": "z"}, False)
    assert renamed == {"z": 1, "b": 2}


def test_rename_keys_deletes_missing():
    renamed = utils.rename_keys({"a": 1, "b": 2}, {"a": "z"}, True)
    assert renamed == {"z": 1}


def test_dedup_all_keeps_first_occurrences():
    assert utils.dedup_all([3, 1, 3, 2, 1]) == [3, 1, 2]