from yoru.hashing import hash_djb2


def test_empty_string_is_seed():
    assert hash_djb2("") == 5381


def test_single_letter():
    assert hash_djb2("a") == 177670


def test_two_letters():
    assert hash_djb2("ab") == 5863208


def test_str_and_bytes_agree():
    assert hash_djb2("key_7") == hash_djb2(b"key_7")


def test_deterministic():
    first = hash_djb2("ab")
    second = hash_djb2("ab")
    assert first == second == 5863208


def test_result_fits_in_64_bits():
    value = hash_djb2("x" * 500)
    assert 0 <= value < 2**64


def test_different_keys_differ():
    assert hash_djb2("age") != hash_djb2("name")
    assert hash_djb2("ab") != hash_djb2("ba")