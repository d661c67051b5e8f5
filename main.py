"""主程序入口 - 按键驱动的四则运算计算器"""
import argparse
import logging
import sys
import pandas as pd

from config.config import LOGGING_CONFIG, REPLAY_CONFIG, validate_config
from display import ConsoleDisplay, HtmlStackDisplay
from session import CalculatorSession, trace_keys, replay_file

logger = logging.getLogger(__name__)


def setup_logging(level=None):
    logging.basicConfig(
        level=getattr(logging, (level or LOGGING_CONFIG['level']).upper()),
        format=LOGGING_CONFIG['format']
    )


def run_interactive(show_stack=False, stream=None, input_stream=None):
    """
    交互模式：每行输入一组按键，输出当前显示

    输入 quit/exit 或 EOF 结束。
    """
    stream = stream or sys.stdout
    input_stream = input_stream or sys.stdin
    session = CalculatorSession(displays=[ConsoleDisplay(stream, show_stack=show_stack)])

    for line in input_stream:
        line = line.strip()
        if line in ('quit', 'exit'):
            break
        if not line:
            continue
        session.press(line)

    logger.info(f"Session ended after {session.key_count} keys")
    return session


def main(args):
    validate_config()

    if args.replay_path:
        logger.info("=== Replaying key script ===")
        results = replay_file(args.replay_path, args.output_path)
        with pd.option_context('display.max_rows', None, 'display.width', 120):
            print(results.to_string(index=False))
        return results

    if args.interactive:
        return run_interactive(show_stack=args.show_stack)

    if args.keys is None:
        raise SystemExit("Nothing to do: pass --keys, --interactive or --replay_path")

    if args.trace:
        trace = trace_keys(args.keys)
        print(trace.to_string(index=False))
        return trace

    html_display = HtmlStackDisplay()
    session = CalculatorSession(displays=[html_display])
    session.press(args.keys)
    if args.show_stack and session.pending:
        print(f"{session.pending} | {session.display_text}")
    else:
        print(session.display_text)
    if args.html:
        print(html_display.html)
    return session


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Key-driven four-function calculator")

    parser.add_argument(
        "--keys",
        type=str,
        default=None,
        help="Key sequence to evaluate, e.g. '2+3*4=' or '9 sqrt + 1 ='. "
             "Key names like 'sqrt' must stand alone: '9sqrt' is split into 9 s q r t"
    )
    parser.add_argument(
        "--trace",
        action="store_true",
        help="Print the display and pending stack after every key"
    )
    parser.add_argument(
        "--interactive",
        action="store_true",
        help="Read key sequences from stdin line by line"
    )
    parser.add_argument(
        "--replay_path",
        type=str,
        default=None,
        help="CSV (with a 'keys' column) or text file with one key sequence per line"
    )
    parser.add_argument(
        "--output_path",
        type=str,
        default=REPLAY_CONFIG['default_output_path'],
        help="Path to save the replay results"
    )
    parser.add_argument(
        "--show_stack",
        action="store_true",
        help="Show pending operations next to the display"
    )
    parser.add_argument(
        "--html",
        action="store_true",
        help="Also print the stack display markup"
    )
    parser.add_argument(
        "--log_level",
        type=str,
        default=LOGGING_CONFIG['level'],
        help="Logging level (DEBUG shows every engine step)"
    )
    args = parser.parse_args()
    setup_logging(args.log_level)
    main(args)
