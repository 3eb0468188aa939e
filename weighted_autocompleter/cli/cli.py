"""
cli.py - command line front end for the autocomplete engines
Features:
- Loads a term file and builds the engine picked on the command line or in config
- One-shot queries with --query, or an interactive prompt with ranked tables
- Slash commands to switch engine, change k and run a quick benchmark
- Uses Rich for tables and formatting
"""

from __future__ import annotations

import argparse
import logging
import shlex
import sys
import time
from typing import Dict, List, Optional, Sequence

# ui styling with Rich
from rich import box
from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt
from rich.table import Table

from weighted_autocompleter import __version__
from weighted_autocompleter.core.registry import ENGINES, create_engine
from weighted_autocompleter.core.protocols import Autocompletor
from weighted_autocompleter.utils.benchmark import compare_engines, sample_prefixes
from weighted_autocompleter.utils.config_manager import Config
from weighted_autocompleter.utils.logger_utils import Log
from weighted_autocompleter.utils.term_loader import load_terms

HELP = ("cmds: <prefix>, /top <prefix>, /k <n>, /engine <name>, /set <key> <val>, /config,\n"
        "      /bench, /help, /quit")


class CLI:
    """Holds the loaded vocabulary and the active engine, and renders results."""

    def __init__(self, words: List[str], weights: List[float], cfg: Optional[Config] = None,
                 console: Optional[Console] = None, log: Optional[Log] = None,
                 verbose: bool = True):
        self.words = words
        self.weights = weights
        # last weight wins for repeated words, same as the engines
        self.weight_of: Dict[str, float] = dict(zip(words, weights))
        self.cfg = cfg or Config()
        self.console = console or Console()
        # one-shot runs only report warnings, so results are not interleaved with build notes
        self.log = log or Log(path=self.cfg.get("log_path"), use_color=False,
                              stream=self.console.file, level="INFO" if verbose else "WARNING")
        self.k: int = self.cfg["max_suggestions"]
        self.engine_name: str = self.cfg["engine"]
        self.engine: Autocompletor = self._build(self.engine_name)
        self.running = True

    def _build(self, name: str) -> Autocompletor:
        t0 = time.perf_counter()
        engine = create_engine(name, self.words, self.weights)
        dt = time.perf_counter() - t0
        self.log.info(f"built {name} engine over {len(self.words)} terms in {dt:.3f}s")
        return engine

    # rendering -----------------------------------------------------------
    def show_matches(self, prefix: str) -> List[str]:
        t0 = time.perf_counter()
        matches = self.engine.top_k_matches(prefix, self.k)
        dt = (time.perf_counter() - t0) * 1000.0

        if not matches:
            self.console.print(f"[yellow]no words start with {prefix!r}[/yellow]")
            return matches

        table = Table(title=f"top {self.k} for {prefix!r} ({self.engine_name}, {dt:.2f} ms)",
                      box=box.SIMPLE)
        table.add_column("#", justify="right", style="dim")
        table.add_column("word", style="cyan")
        table.add_column("weight", justify="right", style="magenta")
        for i, word in enumerate(matches, start=1):
            table.add_row(str(i), word, f"{self.weight_of.get(word, 0.0):.1f}")
        self.console.print(table)
        return matches

    # interactive loop ------------------------------------------------------
    def run(self):
        self.console.rule("[bold magenta]Weighted Autocomplete[/bold magenta]")
        self.console.print(f"[cyan]{len(self.engine)} words loaded, engine={self.engine_name}, k={self.k}[/cyan]")
        self.console.print(HELP + "\n")
        while self.running:
            try:
                line = Prompt.ask("[green]prefix[/green]", default="", console=self.console)
            except (EOFError, KeyboardInterrupt):
                self.console.print("\nbye.")
                break
            self.handle(line)

    def handle(self, line: str):
        """Dispatch one line of input: a slash command or a prefix query."""
        if line.startswith("/"):
            self.cmd(line)
        elif line:
            self.show_matches(line)

    def cmd(self, line: str):
        try:
            p = shlex.split(line)
        except ValueError as e:
            self.console.print(f"[red]bad command: {e}[/red]")
            return
        if not p:
            return
        c = p[0].lower()

        if c in ("/q", "/quit", "/exit"):
            self.running = False
            self.console.print("bye.")

        elif c == "/help":
            self.console.print(HELP)

        elif c == "/top":
            prefix = p[1] if len(p) > 1 else ""
            self.console.print(repr(self.engine.top_match(prefix)))

        elif c == "/k" and len(p) > 1:
            self.set_option("max_suggestions", p[1])

        elif c == "/engine" and len(p) > 1:
            self.set_option("engine", p[1])

        elif c == "/set" and len(p) == 3:
            self.set_option(p[1], p[2])

        elif c == "/config":
            self.show_config()

        elif c == "/bench":
            self.bench()

        else:
            self.console.print("[red]unknown cmd[/red] (try /help)")

    # settings --------------------------------------------------------------
    def set_option(self, key: str, val: str) -> bool:
        """Validate and persist a setting through the config, then apply it."""
        try:
            self.cfg.set(key, val)
        except KeyError:
            self.console.print(f"[red]no such option: {key}[/red] (see /config)")
            return False
        except ValueError as e:
            self.console.print(f"[red]{escape(str(e))}[/red]")
            return False

        if key == "engine" and self.cfg["engine"] != self.engine_name:
            self.engine = self._build(self.cfg["engine"])
            self.engine_name = self.cfg["engine"]
        elif key == "max_suggestions":
            self.k = self.cfg["max_suggestions"]
        elif key == "log_level":
            logging.getLogger().setLevel(self.cfg["log_level"])
        self.console.print(f"{key}={self.cfg[key]}")
        return True

    def show_config(self):
        table = Table(title=f"config ({self.cfg.path or 'in memory'})", box=box.SIMPLE)
        table.add_column("option", style="cyan")
        table.add_column("value")
        for key, val in self.cfg.items():
            table.add_row(key, str(val))
        self.console.print(table)

    def bench(self):
        prefixes = sample_prefixes(self.words)
        report = compare_engines(self.words, self.weights, prefixes, k=self.k,
                                 runs=int(self.cfg["bench_runs"]),
                                 warmup=int(self.cfg["bench_warmup"]))
        table = Table(title="engine benchmark (ms per query)", box=box.SIMPLE)
        for col in ("engine", "build s", "mean", "median", "p90", "max"):
            table.add_column(col, justify="right")
        for name, s in report.items():
            table.add_row(name, f"{s['build_s']:.3f}", f"{s['mean_ms']:.4f}",
                          f"{s['median_ms']:.4f}", f"{s['p90_ms']:.4f}", f"{s['max_ms']:.4f}")
        self.console.print(table)
        return report


# entry point ---------------------------------------------------------------
def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="weighted-autocomplete",
                                     description="Top-k prefix completion over a weighted term file.")
    parser.add_argument("terms", help="term file: optional count line, then '<weight>\\t<word>' lines")
    parser.add_argument("--engine", choices=sorted(ENGINES), help="engine to use (default from config)")
    parser.add_argument("-k", type=int, help="number of suggestions (default from config)")
    parser.add_argument("--config", help="JSON config file")
    parser.add_argument("--query", action="append", metavar="PREFIX",
                        help="print matches for PREFIX and exit (repeatable)")
    parser.add_argument("--bench", action="store_true", help="benchmark every engine and exit")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[Sequence[str]] = None, console: Optional[Console] = None) -> int:
    args = build_parser().parse_args(argv)
    console = console or Console()

    if args.k is not None and args.k < 0:
        console.print("[red]-k must be >= 0[/red]")
        return 2

    try:
        cfg = Config(args.config)
        # command line overrides are not written back to the config file
        if args.engine:
            cfg.data["engine"] = args.engine
        if args.k is not None:
            cfg.data["max_suggestions"] = args.k
        logging.basicConfig(level=cfg["log_level"],
                            format="%(asctime)s %(levelname)s %(name)s: %(message)s")
        words, weights = load_terms(args.terms)
        interactive = not (args.bench or args.query)
        cli = CLI(words, weights, cfg=cfg, console=console, verbose=interactive)
    # AutocompleteError is a ValueError; bad config values raise plain ValueError
    except (OSError, ValueError) as e:
        console.print(f"[red]error:[/red] {escape(str(e))}")
        return 2

    if args.bench:
        cli.bench()
    elif args.query:
        for prefix in args.query:
            cli.show_matches(prefix)
    else:
        cli.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
