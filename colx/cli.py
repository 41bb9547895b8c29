from __future__ import annotations

from pathlib import Path

import typer

from colx.config import ColxSettings
from colx.logger import configure_logging, get_logger
from colx.lru import LRUSet
from colx.mapx import Backend, Map, new_map


app = typer.Typer(help="Playground for the colx map/set backends")
log = get_logger("colx.cli")

_state: dict[str, ColxSettings] = {}


def _settings() -> ColxSettings:
    if "settings" not in _state:
        _state["settings"] = ColxSettings.from_yaml()
    return _state["settings"]


def _parse_pair(raw: str) -> tuple[str, str]:
    key, sep, value = raw.partition("=")
    if not sep or not key:
        raise typer.BadParameter(f"expected KEY=VALUE, got {raw!r}")
    return key, value


@app.callback()
def main(
    config: Path | None = typer.Option(None, "--config", help="Path to colx YAML config"),
) -> None:
    settings = ColxSettings.from_yaml(config)
    _state["settings"] = settings
    configure_logging(settings.logging.level, settings.logging.json_output)


@app.command()
def fill(
    pairs: list[str] = typer.Argument(..., help="KEY=VALUE pairs, applied in order"),
    backend: Backend | None = typer.Option(None, "--backend", "-b"),
    move_to_end: list[str] | None = typer.Option(
        None, "--move-to-end", help="Applied first, in the order given"
    ),
    move_to_front: list[str] | None = typer.Option(
        None, "--move-to-front", help="Applied after every --move-to-end, in the order given"
    ),
) -> None:
    """
    Put pairs into a fresh map and print it.

    Moves run after all puts: every --move-to-end first, then every
    --move-to-front, regardless of how they are interleaved on the command line.
    """
    chosen = backend or _settings().maps.default_backend
    m: Map[str, str] = new_map(chosen)
    for raw in pairs:
        k, v = _parse_pair(raw)
        m.put(k, v)
    log.info("cli.fill", backend=str(chosen), size=m.size())

    reorder = m.as_reorderable()
    for label, keys in (("end", move_to_end or []), ("front", move_to_front or [])):
        for k in keys:
            if reorder is None:
                typer.echo(f"move-to-{label} {k}: unsupported by {chosen} backend")
                continue
            moved = reorder.move_to_end(k) if label == "end" else reorder.move_to_front(k)
            if not moved:
                typer.echo(f"move-to-{label} {k}: not found")

    typer.echo(str(m))


@app.command()
def lru(
    keys: list[str] = typer.Argument(..., help="Keys to touch, in order"),
    capacity: int | None = typer.Option(None, "--capacity", "-c"),
) -> None:
    """Replay key touches on a bounded LRU set and print LRU -> MRU order."""
    cache: LRUSet[str] = LRUSet(capacity, config=_settings())
    for k in keys:
        cache.add(k)
    log.info("cli.lru", capacity=cache.capacity, touched=len(keys))
    typer.echo(" ".join(cache.elems()))


if __name__ == "__main__":
    app()
