# numlab

A workbench for small experiments with the natural numbers and a few signal
toys. Each module stands on its own and can be used from Python or, where it
has one, started as a command.

## Install

    pip install .

To run the tests:

    pip install ".[test]"
    pytest

## Modules

- `numlab.hanoi`: the Tower of Hanoi move count, computed by recursion
  (`hanoi_recursive`), by iteration (`hanoi_iterative`) and in closed form
  (`two_to_the_n_minus_one` gives `2**n - 1`; `two_to_the_n_minus_one_plus_one`
  gives `2**(n - 1) + 1`). Negative arguments raise `ValueError`.
- `numlab.natural`: `Natural`, a positive integer (values below 1 become 1)
  carrying a set of `NaturalProp` flags (`ODD`, `PRIME`, `PERFECT`,
  `TAXICAB`) managed with `set_property`, `clear_property` and
  `has_property`. Naturals compare and order against each other and against
  plain integers.
- `numlab.sieve`: the sieve of Eratosthenes (`sieve_primes(size)` returns the
  primes below `size`) and `divides(a, b)`.
- `numlab.factors`: `divisors`, `prime_factors` (factors with repetition,
  smallest first, optionally from a supplied prime list), and
  `factorization`, which returns a `Number` holding its `PrimeFactor`
  prime powers; also `odd_only` and `squares_of_evens`.
- `numlab.squares`: writing numbers as sums of two positive squares
  (`as_pair_of_squares`, `smallest_sums_of_two_squares`), Pythagorean triples
  (`is_pythagorean_triple`, `pythagorean_triples`), the `Pair` and `Triple`
  tuples and the text helpers `format_pairs` and `format_triples`.
- `numlab.goldbach`: `NaturalGenerator`, an endless iterator over
  consecutive integers; primality by trial division (`is_prime`,
  `get_divisors`, `is_even`, `is_odd`); and `PrimeCache`, which returns the
  nth prime (`nth_prime`, `cached_prime`), splits an even number into two
  cached primes (`find_goldbach`), and `load`s and `dump`s its primes as a
  text file with one prime per line.
- `numlab.creppl`: a small read–eval–print loop. `Repl` prompts for each
  `Param`, hands copies of them to the selected function (a plain callable or
  a list of `FnSpec`) and prints the returned text. Entering `q` or `Q`, or
  reaching end of input, ends the loop; input that is not an integer is
  reported and replaced by 1.
- `numlab.naturally`: `square_evaluator`, a squaring function for the loop,
  and `power_table`, rows of `(i, 2**i - 1, 2**(i-1) + 1)`.
- `numlab.lattice`: `linear_combinations` (the distinct values
  `a*n + b*m - offset` for `n` in -7..7 and `m` in -1..1),
  `combination_evaluator` for the loop, `grid_edges` (a fixed 75-node edge
  list), `linspace`, `scaled_parabola_points` (points `(x, x*x/k)`) and
  `plot_scaled_parabolas`, which draws them with matplotlib.
- `numlab.oscillator`: a phase-stepping sine `Oscillator` (`tick`, `sin`,
  `samples`), `sin_over_interval` and `time_elapsed`.
- `numlab.dft`: `sine_samples` to sample a sine, `dft_bin` for a single
  discrete Fourier transform bin and `spectrum` for a partial transform over
  many bins.
- `numlab.matrix`: `Matrix2d`, a fixed-size grid with `m[row, col]` access
  (out-of-range access raises `IndexError`), `fill` and `format`.
- `numlab.logic`: the building blocks of a predicate-calculus sketch:
  `Statement`, `Proposition`, `Let`, `Qualifier`, `Stmt`, `Operator`,
  `CompoundStmt` and `StatementSource`. `prove()` simply returns `True`;
  there is no inference engine.

## From Python

    >>> from numlab.hanoi import hanoi_recursive, hanoi_iterative
    >>> hanoi_recursive(10), hanoi_iterative(10)
    (1023, 1023)
    >>> from numlab.sieve import sieve_primes
    >>> sieve_primes(10)
    [2, 3, 5, 7]
    >>> from numlab.factors import prime_factors
    >>> prime_factors(20)
    [2, 2, 5]

## Commands

    numlab-sieve [SIZE]             # list the primes below SIZE and count them
    numlab-factors [--limit N]      # prime factors of 1..N and their prime powers
    numlab-squares [--lower L] [--upper U] [--verbose]
                                    # smallest naturals that are sums of two squares in k ways
    numlab-goldbach [--count N] [--primes-file PATH]
                                    # find the Nth prime, cached in primes.txt
    numlab-naturally [--limit N] [--repl]
                                    # table of powers of two, or a squaring loop
    numlab-lattice [--no-show] [--repl]
                                    # plot the scaled parabolas, or explore a*n + b*m - offset
    numlab-oscillator [--frequency F] [--sample-rate R] [--count N] [--interval]
                                    # print samples from a sine oscillator
    numlab-dft [--frequency F] [--sample-rate R] [--count N]
                                    # print a few DFT bins of a sampled sine

## What it does not do

- `numlab-goldbach` only finds primes; splitting even numbers into two primes
  is available from Python through `PrimeCache.find_goldbach`, and it only
  looks among primes already in the cache.
- The only storage is the plain text prime list written by
  `PrimeCache.dump`; nothing else is saved between runs.
- `numlab.logic` describes statements but proves nothing.