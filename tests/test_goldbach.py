import pytest

from numlab.goldbach import (
    NaturalGenerator,
    PrimeCache,
    get_divisors,
    is_even,
    is_odd,
    is_prime,
    main,
)
from numlab.sieve import sieve_primes


def test_generator_starts_at_one_and_counts_up():
    gen = NaturalGenerator()
    first = next(gen)
    second = next(gen)
    assert first == 1
    assert second == first + 1


def test_generator_custom_start():
    gen = NaturalGenerator(40)
    assert [next(gen) for _ in range(3)] == [40, 41, 42]


def test_even_and_odd_partition():
    for n in range(50):
        assert is_even(n) + is_odd(n) == 1


def test_divisors_of_one():
    assert get_divisors(1) == [1]


@pytest.mark.parametrize("n", [2, 12, 30, 97, 100])
def test_divisors_invariants(n):
    divs = get_divisors(n)
    assert divs[0] == 1
    assert divs[-1] == n
    assert divs == sorted(divs)
    assert all(n % d == 0 for d in divs)


def test_is_prime_matches_sieve():
    found = {n for n in range(200) if is_prime(n)}
    assert found == set(sieve_primes(200))


def test_cached_prime_empty_cache():
    assert PrimeCache().cached_prime(1) is None


def test_cached_prime_rejects_zero():
    with pytest.raises(ValueError):
        PrimeCache().cached_prime(0)


def test_nth_prime_matches_sieve():
    expected = sieve_primes(1000)
    cache = PrimeCache()
    for n in range(1, 60):
        assert cache.nth_prime(n) == expected[n - 1]
    assert cache.primes == expected[:59]


def test_nth_prime_extends_partial_cache():
    expected = sieve_primes(1000)
    cache = PrimeCache(expected[:5])
    assert cache.nth_prime(40) == expected[39]
    assert len(cache.primes) == 40


def test_find_goldbach_pairs_sum_to_n():
    cache = PrimeCache(sieve_primes(500))
    for n in range(4, 400, 2):
        pair = cache.find_goldbach(n)
        a, b = pair
        assert a + b == n
        assert is_prime(a) and is_prime(b)


def test_find_goldbach_first_member_is_smallest():
    cache = PrimeCache(sieve_primes(500))
    a, _ = cache.find_goldbach(100)
    candidates = [p for p in cache.primes if is_prime(100 - p)]
    assert a == candidates[0]


def test_find_goldbach_odd_raises():
    with pytest.raises(ValueError):
        PrimeCache(sieve_primes(50)).find_goldbach(9)


def test_find_goldbach_without_primes():
    assert PrimeCache().find_goldbach(10) is None


def test_dump_load_round_trip(tmp_path):
    path = tmp_path / "primes.txt"
    primes = sieve_primes(300)
    PrimeCache(primes).dump(path)
    loaded = PrimeCache()
    loaded.load(path)
    assert loaded.primes == primes
    assert loaded.cached_prime(3) == primes[2]


def test_main_writes_cache(tmp_path, capsys):
    path = tmp_path / "primes.txt"
    assert main(["--count", "25", "--primes-file", str(path)]) == 0
    expected = sieve_primes(1000)
    assert f"nth prime: {expected[24]}" in capsys.readouterr().out
    reloaded = PrimeCache()
    reloaded.load(path)
    assert reloaded.primes == expected[:25]