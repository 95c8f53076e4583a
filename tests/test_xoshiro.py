from magpie.xoshiro import XOSHIRO_MAX, SplitMix64, Xoshiro


def test_splitmix_known_first_output_for_zero_seed():
    assert SplitMix64(0).next() == 0xE220A8397B1DCDAF


def test_splitmix_is_deterministic():
    a = SplitMix64(12345)
    b = SplitMix64(12345)
    assert [a.next() for _ in range(10)] == [b.next() for _ in range(10)]


def test_xoshiro_seed_fills_state_from_splitmix():
    mixer = SplitMix64(42)
    expected = [mixer.next() for _ in range(4)]
    assert Xoshiro(42).state == expected


def test_same_seed_same_sequence():
    a = Xoshiro(7)
    b = Xoshiro(7)
    assert [a.next() for _ in range(100)] == [b.next() for _ in range(100)]


def test_different_seeds_differ():
    a = Xoshiro(1)
    b = Xoshiro(2)
    assert [a.next() for _ in range(5)] != [b.next() for _ in range(5)]


def test_outputs_within_64_bits():
    prng = Xoshiro(99)
    assert all(0 <= prng.next() <= XOSHIRO_MAX for _ in range(1000))


def test_reseed_restarts_sequence():
    prng = Xoshiro(5)
    first = [prng.next() for _ in range(5)]
    prng.seed(5)
    assert [prng.next() for _ in range(5)] == first


def test_copy_is_independent():
    prng = Xoshiro(3)
    prng.next()
    clone = prng.copy()
    assert clone.state == prng.state
    expected = [prng.next() for _ in range(5)]
    assert [clone.next() for _ in range(5)] == expected
    clone.next()
    assert clone.state != prng.state


def test_jump_is_deterministic_and_changes_state():
    a = Xoshiro(11)
    b = a.copy()
    before = list(a.state)
    a.jump()
    b.jump()
    assert a.state == b.state
    assert a.state != before


def test_long_jump_differs_from_jump():
    a = Xoshiro(11)
    b = a.copy()
    a.jump()
    b.long_jump()
    assert a.state != b.state
    c = Xoshiro(11)
    c.long_jump()
    assert c.state == b.state