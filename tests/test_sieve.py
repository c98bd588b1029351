import pytest

from numlab.sieve import divides, main, sieve_primes


def test_divides():
    assert divides(2, 20)
    assert not divides(3, 20)


def test_divides_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        divides(0, 5)


def test_small_sieve():
    assert sieve_primes(10) == [2, 3, 5, 7]


@pytest.mark.parametrize("size", [-3, 0, 1, 2])
def test_tiny_sizes_have_no_primes(size):
    assert sieve_primes(size) == []


def test_full_size_prime_count():
    assert len(sieve_primes(10000001)) == 664579


def test_primes_have_no_smaller_prime_divisor():
    primes = sieve_primes(500)
    for idx, p in enumerate(primes):
        assert not any(divides(q, p) for q in primes[:idx])


def test_every_composite_has_a_listed_divisor():
    size = 500
    primes = sieve_primes(size)
    prime_set = set(primes)
    for n in range(2, size):
        if n not in prime_set:
            assert any(divides(p, n) for p in primes if p < n)


def test_sorted_and_unique():
    primes = sieve_primes(1000)
    assert primes == sorted(set(primes))


def test_main_prints_primes_and_count(capsys):
    assert main(["30"]) == 0
    lines = capsys.readouterr().out.splitlines()
    primes = sieve_primes(30)
    assert lines[:-1] == [str(p) for p in primes]
    assert lines[-1] == f"number of primes: {len(primes)}"