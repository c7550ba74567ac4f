import re
import sys
from pathlib import Path

# Configuration
from config import SimulationConfig, load_simulation_config

# Simulator components
from simulator.infrastructure.message_broker import MessageBroker
from simulator.infrastructure.realtime_env import create_environment
from simulator.infrastructure.event_log import FileEventLog
from simulator.core.load_sensor import LoadSensor
from simulator.implementations.traditional.call_system import TraditionalCallSystem
from simulator.implementations.traditional.request_parser import RequestParser

# Controller
from controller.dispatcher import Dispatcher

# Analyzer
from analyzer.statistics import Statistics

DEFAULT_CONFIG_PATH = "scenarios/simulation/default.yaml"
PROMPT = ("Enter floor request from outside (eg 5U, 8D) or inside (eg 2), "
          "'O<seconds>' for overweight or 'Q' to end: ")
OVERWEIGHT_PATTERN = re.compile(r'^O(\d+(?:\.\d+)?)$')


def load_config(config_path=None) -> SimulationConfig:
    """
    Load the session configuration

    An explicit path must exist. Without one, the default scenario is used
    when present and built-in defaults otherwise.
    """
    if config_path is not None:
        return load_simulation_config(config_path)
    if Path(DEFAULT_CONFIG_PATH).exists():
        return load_simulation_config(DEFAULT_CONFIG_PATH)
    return SimulationConfig()


def run_console(config: SimulationConfig, input_func=input):
    """
    Interactive session: read one token per line, dispatch after each.

    Args:
        config: Session configuration
        input_func: Line reader (replaced in tests)

    Returns:
        Dispatcher: The dispatcher, for its visited floors and state
    """
    print("--- Session Setup ---")
    env = create_environment(config.realtime_factor)
    broker = MessageBroker(env)
    statistics = Statistics(broker)
    statistics.set_simulation_metadata(config.to_dict())

    event_log = FileEventLog(config.logging.log_file)
    if config.logging.reset_on_start:
        event_log.reset()

    dispatcher = Dispatcher(
        env, event_log,
        timing=config.timing,
        broker=broker,
        home_floor=config.elevator.home_floor,
        echo=config.logging.console,
    )
    call_system = TraditionalCallSystem(config.building.num_floors, config.building.lowest_floor)
    parser = RequestParser(dispatcher, call_system)
    load_sensor = LoadSensor(env, dispatcher.sensor, [], name="LoadSensor")

    # until user enters 'Q'
    while True:
        try:
            line = input_func(PROMPT)
        except EOFError:
            break
        token = line.strip().upper()
        if token == "Q":
            break

        overweight = OVERWEIGHT_PATTERN.match(token)
        if overweight:
            try:
                load_sensor.hold_overweight(float(overweight.group(1)))
            except ValueError as e:
                print(f"[Console] Ignored: {e}")
        elif token:
            parser.submit(token)

        dispatcher.run()
        statistics.collect()

    print("Visited floors: " + ", ".join(str(floor) for floor in sorted(dispatcher.visited_floors)))

    statistics.collect()
    statistics.print_summary()
    if config.logging.event_log_jsonl:
        statistics.save_event_log(config.logging.event_log_jsonl)
    if config.logging.trajectory_plot:
        statistics.plot_trajectory_diagram(config.logging.trajectory_plot)

    return dispatcher


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    config_path = argv[0] if argv else None
    try:
        config = load_config(config_path)
    except (FileNotFoundError, ValueError) as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    run_console(config)
    return 0


if __name__ == '__main__':
    sys.exit(main())
