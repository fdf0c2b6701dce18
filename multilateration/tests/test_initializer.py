from multilateration.core.initializer import INITIAL_GUESS_SEED, initial_guess


def test_initial_guess_is_deterministic():
    assert initial_guess() == initial_guess()
    assert initial_guess(7) == initial_guess(7)


def test_initial_guess_bounds():
    for seed in (INITIAL_GUESS_SEED, 0, 1, 12345):
        g = initial_guess(seed)
        for v in (g.x, g.y, g.z):
            assert -100.0 <= v <= 100.0
        assert 0.0 <= g.xy_variance <= 100.0
        assert 0.0 <= g.z_variance <= 100.0


def test_seed_changes_guess():
    assert initial_guess(1) != initial_guess(2)
