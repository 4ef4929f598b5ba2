import logging
import sys
import time
from pathlib import Path

import click
from netrate.data.net_dev import RateSample, Snapshot
from netrate.util import conversion, history, network
from netrate.util import log as netrate_log

context_settings = dict(help_option_names=["-h", "--help"])
logger = logging.getLogger("netrate")

NAME_WIDTH = 10
NUMBER_WIDTH = 30


def render_table(samples: list[RateSample]) -> str:
    name_width = max([len(sample.interface) for sample in samples] + [NAME_WIDTH])
    lines: list[str] = [
        f"{'Interface':>{name_width}} {'Receive':^{NUMBER_WIDTH}} {'Transmit':^{NUMBER_WIDTH}}"
    ]
    for sample in samples:
        received = conversion.format_rate(sample.rx_rate)
        transmitted = conversion.format_rate(sample.tx_rate)
        lines.append(
            f"{sample.interface:>{name_width}} {received:>{NUMBER_WIDTH}} {transmitted:>{NUMBER_WIDTH}}"
        )
    return "\n".join(lines)


def next_snapshot(
    source: Path, interfaces: list[str] | None, interval: float
) -> Snapshot:
    """
    Wait for the next tick and capture, skipping ticks where the source
    can't be read.
    """
    while True:
        time.sleep(interval)
        try:
            return network.capture(source=source, interfaces=interfaces)
        except network.SourceUnavailable as e:
            logger.warning(f"skipping tick: {e}")


def monitor(
    history_file: Path,
    source: Path,
    interfaces: list[str] | None,
    interval: float,
    count: int,
):
    current = network.capture(source=source, interfaces=interfaces)
    previous = history.load(history_file)
    if previous is None:
        previous = current
    else:
        previous = history.rebase(previous, current)

    clear = sys.stdout.isatty() and count != 1
    history_warned = False
    frames = 0

    while True:
        samples = network.compute(previous, current)
        logger.debug(
            f"frame {frames + 1}: {len(samples)} interfaces over {current.timestamp - previous.timestamp:.3f}s"
        )
        if clear:
            click.clear()
        click.echo(render_table(samples))
        frames += 1

        try:
            history.save(history_file, current)
        except history.HistoryError as e:
            logger.warning(str(e))
            if not history_warned:
                click.echo(f"warning: {e}", err=True)
                history_warned = True

        if count and frames >= count:
            return

        previous = current
        current = next_snapshot(source=source, interfaces=interfaces, interval=interval)


@click.command(
    help="Show per-interface network throughput from /proc/net/dev",
    context_settings=context_settings,
)
@click.version_option(
    None, "-V", "--version", package_name="netrate", prog_name="netrate"
)
@click.option(
    "-f",
    "--history-file",
    required=True,
    type=click.Path(dir_okay=False, path_type=Path),
    help="The file used to keep the previous sample",
)
@click.option(
    "-n",
    "--interval",
    type=click.FloatRange(min=0),
    default=1.0,
    show_default=True,
    help="The update interval (in seconds)",
)
@click.option(
    "-c",
    "--count",
    type=click.IntRange(min=0),
    default=0,
    help="Exit after this many frames (0 runs until interrupted)",
)
@click.option(
    "-i", "--interface", multiple=True, help="Only show this interface (repeatable)"
)
@click.option(
    "-s",
    "--source",
    type=click.Path(dir_okay=False, path_type=Path),
    default=network.PROC_NET_DEV,
    show_default=True,
    help="The counters file to read",
)
@click.option("-d", "--debug", default=False, is_flag=True, help="Enable debug logging")
def main(
    history_file: Path,
    interval: float,
    count: int,
    interface: tuple[str, ...],
    source: Path,
    debug: bool,
):
    logfile = netrate_log.default_logfile()
    netrate_log.configure(debug=debug, name="netrate", logfile=logfile)
    logger.info(f"starting with source={source} history_file={history_file}")

    try:
        monitor(
            history_file=history_file,
            source=source,
            interfaces=list(interface) or None,
            interval=interval,
            count=count,
        )
    except network.SourceUnavailable as e:
        logger.error(str(e))
        click.echo(f"error: {e}", err=True)
        sys.exit(1)
    except KeyboardInterrupt:
        logger.info("interrupted")

    logger.info("exiting")


if __name__ == "__main__":
    main()
