import logging
from time import perf_counter

import click
import numba
import numpy as np

from densepy import __version__, interp_nearest, kmatrix2, quickfind, quickmax
from densepy.backends import cuda_available
from densepy.config import Config


def _timed(func, *args, **kwargs) -> tuple[float, float]:
    """Run ``func`` twice; return (first call incl. JIT compile, steady call)."""

    t0 = perf_counter()
    func(*args, **kwargs)
    t1 = perf_counter()
    func(*args, **kwargs)
    t2 = perf_counter()
    return t1 - t0, t2 - t1


@click.group()
@click.version_option(__version__, prog_name="densepy")
def cli() -> None:
    pass


@cli.command()
def info() -> None:
    """Print version and runtime capabilities."""

    click.echo(f"densepy {__version__}")
    click.echo(f"numba {numba.__version__}, threads: {numba.get_num_threads()}")
    click.echo(f"cuda available: {cuda_available()}")


@cli.command()
@click.option(
    "--config",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Path to a json or yaml config file.",
)
@click.option("--points", type=int, default=None, help="Number of query points.")
@click.option("--centers", type=int, default=None, help="Number of centers.")
@click.option("--seed", type=int, default=None, help="RNG seed for the inputs.")
@click.option(
    "--gpu/--cpu",
    default=None,
    help="Run the point kernels on CUDA. Overrides the config file.",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="Python logging level.",
)
def benchmark(
    config: str | None,
    points: int | None,
    centers: int | None,
    seed: int | None,
    gpu: bool | None,
    log_level: str | None,
) -> None:
    """Time every kernel on random inputs."""

    settings = Config(config)
    logging.basicConfig(level=(log_level or settings.log_level).upper())
    settings.apply()

    params = settings.benchmark
    if points is not None:
        params["points"] = points
    if centers is not None:
        params["centers"] = centers
    if seed is not None:
        params["seed"] = seed
    if gpu is None:
        gpu = settings.gpu

    rng = np.random.default_rng(params["seed"])
    p = rng.random((params["points"], params["dimensions"]))
    c = rng.random((params["centers"], params["dimensions"]))
    cval = rng.random((params["centers"], params["values"]))
    a = rng.random((params["points"], 2))
    b = rng.random((params["centers"], 2))
    matrix = rng.random(params["mask_size"])
    mask = rng.random(params["mask_size"]) < 0.5
    order = rng.permutation(params["mask_size"]).astype(np.uint32) + 1
    # worst case for the ordered search: nothing is true
    tf = np.zeros(params["mask_size"], dtype=bool)

    runs = [
        (
            "interp_nearest",
            _timed(interp_nearest, p, c, cval, params["radius"], gpu=gpu),
        ),
        ("kmatrix2", _timed(kmatrix2, a, b, gpu=gpu)),
        ("quickfind", _timed(quickfind, tf, order)),
        ("quickmax", _timed(quickmax, matrix, mask)),
    ]
    for name, (first, steady) in runs:
        click.echo(f"{name:<16} first: {first:.6f} s  steady: {steady:.6f} s")
