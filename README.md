# optionpricer

This library prices European, digital, American and Asian options in a Black-Scholes world. It offers three methods: closed-form formulas, Cox-Ross-Rubinstein binomial trees and Monte Carlo simulation. It uses only the standard library.

## Installation

```
pip install .
```

To install with the test requirements:

```
pip install .[test]
```

## Options

The module `optionpricer.options` defines these contracts:

| Class                | Nature   | Payoff                                   |
|----------------------|----------|------------------------------------------|
| `CallOption`         | Vanilla  | `max(S - K, 0)`                          |
| `PutOption`          | Vanilla  | `max(K - S, 0)`                          |
| `DigitalCallOption`  | Digital  | `1` if `S >= K`, else `0`                |
| `DigitalPutOption`   | Digital  | `1` if `S <= K`, else `0`                |
| `AmericanCallOption` | American | `max(S - K, 0)`, exercisable early       |
| `AmericanPutOption`  | American | `max(K - S, 0)`, exercisable early       |
| `AsianCallOption`    | Asian    | `max(mean(path) - K, 0)`                 |
| `AsianPutOption`     | Asian    | `max(K - mean(path), 0)`                 |

Every option has these properties:

- `strike`
- `expiry`
- `nature`, an `OptionNature`
- `option_type`, an `OptionType`
- `time_steps`

Every option also has the methods `is_american()` and `is_asian()`.

A negative strike raises `ValueError`.

Asian options take a sequence of monitoring dates in place of a single expiry. Their value comes from `payoff_path(prices)`. Calling `payoff(price)` on an Asian option always returns `0.0`. Averaging an empty path raises `ValueError`.

```python
from optionpricer.options import CallOption, AsianPutOption

call = CallOption(expiry=1.0, strike=100.0)
call.payoff(110.0)                              # 10.0

asian = AsianPutOption([0.25, 0.5, 0.75, 1.0], 100.0)
asian.payoff_path([95.0, 98.0, 102.0, 97.0])    # 2.0
```

## Black-Scholes closed form

`BlackScholesPricer` prices vanilla and digital options, and `delta()` returns their delta. Both the price and the delta are `0.0` for American and Asian options. Passing `None` as the option raises `ValueError`.

```python
from optionpricer.options import CallOption
from optionpricer.black_scholes import BlackScholesPricer

pricer = BlackScholesPricer(CallOption(1.0, 100.0), asset_price=100.0,
                            interest_rate=0.05, volatility=0.2)
price = pricer()
delta = pricer.delta()
```

## Cox-Ross-Rubinstein binomial tree

You can build a `CRRPricer` in two ways:

- Give it the per-step up, down and interest returns directly.
- Call `CRRPricer.from_black_scholes(option, depth, asset_price, rate, volatility)`. This requires `depth >= 1`.

The pricer handles vanilla, digital and American options. It raises `ValueError` in these cases:

- the parameters allow arbitrage;
- the asset price is not positive;
- the depth is negative;
- the option is an Asian option.

For American options, `get_exercise(n, i)` tells you whether early exercise is optimal at a node. Calling it for any other option raises `ValueError`. `get(n, i)` returns the value at a node. `compute()` fills the tree explicitly; otherwise it is filled on first use.

```python
from optionpricer.options import AmericanPutOption
from optionpricer.crr import CRRPricer

put = AmericanPutOption(1.0, 100.0)
crr = CRRPricer.from_black_scholes(put, depth=50, asset_price=100.0,
                                   rate=0.05, volatility=0.2)
value = crr()                    # backward induction
crr.get_exercise(10, 3)          # early-exercise flag at a node
```

`crr(True)` uses the closed-form binomial sum. That sum is only correct for European-style options.

## Monte Carlo

`BlackScholesMCPricer` simulates prices under the risk-neutral measure and keeps a running estimate.

- **Vanilla and digital options** are simulated to expiry.
- **Asian options** are simulated along their monitoring dates.
- **American options** are priced without early exercise. Use `CRRPricer` for them.

Each call to `generate(n)` adds `n` paths. The path counter `nb_paths` is a property, and it starts at 1. The running estimate is the discounted sum of payoffs divided by that counter. `confidence_interval()` returns a 95% interval as a `(low, high)` tuple.

```python
from optionpricer import random_source
from optionpricer.options import AsianCallOption
from optionpricer.monte_carlo import BlackScholesMCPricer

random_source.seed(42)
mc = BlackScholesMCPricer(AsianCallOption([0.5, 1.0], 100.0), 100.0, 0.05, 0.2)
mc.generate(10_000)
estimate = mc()
low, high = mc.confidence_interval()
mc.nb_paths                      # 10001
```

The module `optionpricer.random_source` holds one shared Mersenne Twister generator. It provides three functions:

- `seed(value)` makes runs reproducible. With `None`, it seeds from system entropy.
- `rand_unif()` returns a uniform draw.
- `rand_norm()` returns a standard normal draw.

## Binary trees

`optionpricer.binary_tree.BinaryTree(depth)` is the triangular lattice that the CRR pricer uses. Row `n` holds `n + 1` nodes.

- `set_depth` resizes the tree and keeps existing values.
- `set_node` and `get_node` raise `IndexError` outside the triangle.
- `render()` returns a flat listing of the rows followed by an ASCII drawing.
- `display(stream)` writes that rendering to a stream, or to standard output by default.

`size_float(value)` gives the printed width of a value, with trailing zeros dropped.

## What the package does not do

This is a library only. It has no command-line program and reads no input files. You write Python code that calls it.

## Running the tests

```
pytest
```