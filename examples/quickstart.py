from __future__ import annotations


def main() -> None:
    from option_greeks import (
        ExerciseStyle,
        LatticeConfig,
        OptionContract,
        OptionType,
        PricingConfig,
        price,
    )
    from option_greeks.diagnostics import early_exercise_premium

    call = OptionContract(
        spot=100.0,
        strike=100.0,
        rate=0.05,
        dividend_yield=0.0,
        volatility=0.20,
        expiry=1.0,
    )
    res = price(call)
    print("BSM call:", res.price)
    print("Greeks:", res.greeks.as_dict())

    put = OptionContract(
        spot=100.0,
        strike=110.0,
        rate=0.05,
        dividend_yield=0.0,
        volatility=0.20,
        expiry=1.0,
        exercise=ExerciseStyle.AMERICAN,
        kind=OptionType.PUT,
    )
    cfg = PricingConfig(lattice=LatticeConfig(n_steps=1000))
    res = price(put, config=cfg)
    print("CRR American put:", res.price)
    print("Greeks:", res.greeks.as_dict())
    print("Early-exercise premium:", early_exercise_premium(put, 1000))


if __name__ == "__main__":
    main()
