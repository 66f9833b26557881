"""Evolutio Arena - tabbed Marimo front end for matches, tournaments and evolution."""

import marimo

__generated_with = "0.17.8"
app = marimo.App(width="full")


@app.cell
def _():
    import marimo as mo

    from evolutio import (
        DEFAULT_GENERATIONS,
        DEFAULT_PAYOFF,
        DEFAULT_POPULATION,
        DEFAULT_ROUNDS,
        ROSTER,
        STRATEGY_DESCRIPTIONS,
        EvolutioError,
        PayoffMatrix,
        configure_logging,
        get_strategy_names,
        run_evolution,
        run_match,
        run_tournament,
    )
    from evolutio.api import greet_engine
    from evolutio.core.config import MAX_NOISE, MAX_ROUNDS
    from evolutio.visualization import (
        create_cumulative_score_chart,
        create_evolution_chart,
        create_match_timeline_chart,
        create_tournament_chart,
    )

    configure_logging()

    return (
        DEFAULT_GENERATIONS,
        DEFAULT_PAYOFF,
        DEFAULT_POPULATION,
        DEFAULT_ROUNDS,
        EvolutioError,
        MAX_NOISE,
        MAX_ROUNDS,
        PayoffMatrix,
        ROSTER,
        STRATEGY_DESCRIPTIONS,
        create_cumulative_score_chart,
        create_evolution_chart,
        create_match_timeline_chart,
        create_tournament_chart,
        get_strategy_names,
        greet_engine,
        mo,
        run_evolution,
        run_match,
        run_tournament,
    )


@app.cell
def _(DEFAULT_GENERATIONS, DEFAULT_PAYOFF, DEFAULT_ROUNDS, MAX_NOISE, MAX_ROUNDS, mo):
    # Simulation parameters shared by every tab
    rounds = mo.ui.number(start=1, stop=MAX_ROUNDS, value=DEFAULT_ROUNDS, label="Total Rounds")
    noise = mo.ui.slider(0.0, MAX_NOISE, step=0.01, value=0.0, label="Signal Noise")
    generations = mo.ui.slider(10, 200, step=10, value=DEFAULT_GENERATIONS, label="Generations")
    seed = mo.ui.number(start=0, stop=2**31 - 1, value=0, label="Seed (0 = random)")

    payoff_t = mo.ui.number(value=DEFAULT_PAYOFF["t"], label="T (Defect/Coop)")
    payoff_r = mo.ui.number(value=DEFAULT_PAYOFF["r"], label="R (Coop/Coop)")
    payoff_p = mo.ui.number(value=DEFAULT_PAYOFF["p"], label="P (Defect/Defect)")
    payoff_s = mo.ui.number(value=DEFAULT_PAYOFF["s"], label="S (Coop/Defect)")
    return generations, noise, payoff_p, payoff_r, payoff_s, payoff_t, rounds, seed


@app.cell
def _(PayoffMatrix, payoff_p, payoff_r, payoff_s, payoff_t, seed):
    matrix = PayoffMatrix(
        t=int(payoff_t.value),
        r=int(payoff_r.value),
        p=int(payoff_p.value),
        s=int(payoff_s.value),
    )
    run_seed = int(seed.value) or None
    return matrix, run_seed


@app.cell
def _(get_strategy_names, mo):
    _names = get_strategy_names()
    player1 = mo.ui.dropdown(
        options={v: k for k, v in _names.items()},
        label="Player 1",
        value="Tit-For-Tat",
    )
    player2 = mo.ui.dropdown(
        options={v: k for k, v in _names.items()},
        label="Player 2",
        value="Always Defect",
    )
    match_button = mo.ui.run_button(label="Start Simulation")
    tournament_button = mo.ui.run_button(label="Run Tournament")
    evolution_button = mo.ui.run_button(label="Run Evolution")
    return evolution_button, match_button, player1, player2, tournament_button


@app.cell
def _(DEFAULT_POPULATION, ROSTER, get_strategy_names, mo):
    _names = get_strategy_names()
    population_inputs = mo.ui.array(
        [
            mo.ui.number(start=0, stop=100, value=DEFAULT_POPULATION, label=_names[s.value])
            for s in ROSTER
        ],
        label="Initial Populations",
    )
    return (population_inputs,)


@app.cell
def _(
    EvolutioError,
    create_cumulative_score_chart,
    create_match_timeline_chart,
    match_button,
    matrix,
    mo,
    noise,
    player1,
    player2,
    rounds,
    run_match,
    run_seed,
):
    mo.stop(not match_button.value, mo.md("_Pick two strategies and start the simulation._"))

    try:
        match_result = run_match(
            player1.value, player2.value, int(rounds.value), float(noise.value),
            matrix, seed=run_seed,
        )
    except EvolutioError as _e:
        match_view = mo.callout(mo.md(f"**Match failed:** {_e}"), kind="danger")
    else:
        _log = "\n".join(
            f"Round {i + 1}: P1 uses {a1.value} | P2 uses {a2.value}"
            for i, (a1, a2) in enumerate(match_result.rounds)
        )
        match_view = mo.vstack([
            mo.ui.altair_chart(create_match_timeline_chart(match_result)),
            mo.ui.altair_chart(create_cumulative_score_chart(match_result, matrix)),
            mo.md(
                f"**RESULT:** {match_result.player_name} ({match_result.player_score})"
                f" - {match_result.opponent_name} ({match_result.opponent_score})"
            ),
            mo.accordion({"Round log": mo.plain_text(_log)}),
        ])
    match_view
    return


@app.cell
def _(
    EvolutioError,
    create_tournament_chart,
    matrix,
    mo,
    noise,
    rounds,
    run_seed,
    run_tournament,
    tournament_button,
):
    mo.stop(not tournament_button.value, mo.md("_Run the tournament to see the leaderboard._"))

    try:
        tournament_result = run_tournament(
            int(rounds.value), float(noise.value), matrix, seed=run_seed
        )
    except EvolutioError as _e:
        tournament_view = mo.callout(mo.md(f"**Tournament failed:** {_e}"), kind="danger")
    else:
        tournament_view = mo.ui.altair_chart(create_tournament_chart(tournament_result))
    tournament_view
    return


@app.cell
def _(
    EvolutioError,
    create_evolution_chart,
    evolution_button,
    generations,
    matrix,
    mo,
    noise,
    population_inputs,
    rounds,
    run_evolution,
    run_seed,
):
    mo.stop(not evolution_button.value, mo.md("_Run the evolution to see population dynamics._"))

    try:
        evolution_result = run_evolution(
            int(rounds.value),
            float(noise.value),
            [int(v) for v in population_inputs.value],
            int(generations.value),
            matrix,
            seed=run_seed,
        )
    except EvolutioError as _e:
        evolution_view = mo.callout(mo.md(f"**Evolution failed:** {_e}"), kind="danger")
    else:
        _final = evolution_result[-1]
        evolution_view = mo.vstack([
            mo.ui.altair_chart(create_evolution_chart(evolution_result)),
            mo.md(
                f"Ran {len(evolution_result)} generation(s); final population "
                f"{_final.total_population}."
            ),
        ])
    evolution_view
    return


@app.cell
def _(
    ROSTER,
    STRATEGY_DESCRIPTIONS,
    evolution_button,
    generations,
    get_strategy_names,
    greet_engine,
    match_button,
    mo,
    noise,
    payoff_p,
    payoff_r,
    payoff_s,
    payoff_t,
    player1,
    player2,
    population_inputs,
    rounds,
    seed,
    tournament_button,
):
    _names = get_strategy_names()
    _settings = mo.vstack([
        mo.md("### Simulation Parameters"),
        rounds,
        noise,
        generations,
        seed,
        mo.md("### Payoff Matrix"),
        mo.hstack([payoff_t, payoff_r]),
        mo.hstack([payoff_p, payoff_s]),
    ])

    tabs = mo.ui.tabs({
        "Match": mo.vstack([mo.hstack([player1, player2]), match_button]),
        "Tournament": tournament_button,
        "Evolution": mo.vstack([population_inputs, evolution_button]),
        "Strategies": mo.md("\n".join(
            f"- **{_names[s.value]}**: {STRATEGY_DESCRIPTIONS[s]}" for s in ROSTER
        )),
    })

    mo.vstack([
        mo.md(f"# EVOLUTIO\n_Axelrod tournament engine - {greet_engine()}_"),
        mo.hstack([_settings, tabs], widths=[1, 3]),
    ])
    return


if __name__ == "__main__":
    app.run()
