from fogos.rand import ParkMiller, do_rand


def test_first_value_from_zero():
    assert do_rand(0) == 16806


def test_state_is_reduced_modulo():
    assert do_rand(0x7FFFFFFE) == do_rand(0)


def test_range():
    gen = ParkMiller(12345)
    for _ in range(2000):
        value = gen.rand()
        assert 0 <= value <= 0x7FFFFFFD


def test_deterministic():
    a = ParkMiller(7)
    b = ParkMiller(7)
    assert [a.rand() for _ in range(50)] == [b.rand() for _ in range(50)]


def test_generator_chains_do_rand():
    gen = ParkMiller(1)
    ctx = 1
    for _ in range(20):
        ctx = do_rand(ctx)
        assert gen.rand() == ctx
        assert gen.state == ctx


def test_different_seeds_differ():
    assert ParkMiller(1 ^ 31).rand() != ParkMiller(1 ^ 7177).rand()