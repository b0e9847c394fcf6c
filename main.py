from GameController import GameController, board_to_text, load_pattern
from LifeSimulator import run_simulation

import logging
import os
import time

DEFAULT_CONFIG = {
        'pattern': 'glider',
        'generations': 30,
        'log_interval': 5
    }

logFile = "game_of_life.log"


def setupLogging():
    if not os.path.exists(logFile):
        print(f"Log file '{logFile}' does not exist, creating a new one.\n")

    logging.basicConfig(filename= logFile,
                        filemode = 'a', #append log file, DO NOT SET to 'w'
                        format = '%(asctime)s - %(levelname)s - %(message)s',
                        level = logging.INFO,
                        datefmt='%Y-%m-%d %H:%M:%S')
    print(f"Logging initialized. Check {logFile} for details.\n")


def getModeSelection():
    """
    Returns:
        bool: True if TEST_MODE, False if USER_MODE
    """
    while True:
        print("Select mode:\n")
        print("1. TEST MODE (Uses DEFAULT_CONFIG)\n")
        print("2. USER MODE (Input values)\n")
        print("q. Shows DEFAULT_CONFIG\n")
        choice = input("Enter choice: ").strip().lower()
        if choice in ['1', '2']:
            logging.info(f"User selected {choice} mode.")
            return choice == '1'
        elif choice == 'q':
            print(f"{DEFAULT_CONFIG}\n")
        else:
            print("Invalid choice. Please enter '1', '2' or 'q'.\n")


def getConfig(test_mode):
    if test_mode:
        return dict(DEFAULT_CONFIG)
    name, _ = GameController.getValidPattern()
    return {
        'pattern': name,
        'generations': GameController.getValidGenerations(),
        'log_interval': GameController.getValidLogInterval()
    }


def main():
    setupLogging()
    config = getConfig(getModeSelection())
    logging.info(f"Config: {config}")

    try:
        board = load_pattern(config['pattern'])
        start = time.time()
        result = run_simulation(board, config['generations'], log_interval=config['log_interval'])
        duration = time.time() - start
    except ValueError as e:
        logging.error(f"Simulation failed: {e}")
        print(f"Simulation failed: {e}")
        return

    logging.info(f"Ran {result.generations_run} generations of '{config['pattern']}' in {duration:.2f}s.")
    print(f"Generation {result.generations_run}:")
    for line in board_to_text(result.final_board, alive='*', dead='.'):
        print(line)
    if result.period is not None:
        print(f"\nPattern settled into a cycle of period {result.period} from generation {result.cycle_start}.")


if __name__ == "__main__":
    main()
