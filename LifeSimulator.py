import logging
from tqdm import tqdm


class SimulationResult:
    def __init__(self, history, cycle_start=None, period=None):
        self.history = history          # boards from the seed onwards
        self.cycle_start = cycle_start  # index of the first board that repeats
        self.period = period            # cycle length, 1 for a still life

    @property
    def final_board(self):
        return self.history[-1]

    @property
    def generations_run(self):
        return len(self.history) - 1


def find_period(history):
    """
    Look for the first board that equals an earlier one.

    Returns:
        (cycle_start, period), or (None, None) if nothing repeats
    """
    seen = {}
    for index, board in enumerate(history):
        if board in seen:
            return seen[board], index - seen[board]
        seen[board] = index
    return None, None


def run_simulation(board, generations, log_interval=1, stop_on_cycle=True):
    """
    Advance a board a number of generations.

    Args:
        board: the seed Board
        generations: how many times to call next()
        log_interval: log generation and population every this many generations
        stop_on_cycle: stop as soon as a board repeats an earlier one

    Returns:
        SimulationResult
    """
    if isinstance(generations, bool) or not isinstance(generations, int) or generations < 0:
        raise ValueError(f"generations must be a non-negative integer, got {generations!r}")
    if isinstance(log_interval, bool) or not isinstance(log_interval, int) or log_interval < 1:
        raise ValueError(f"log_interval must be an integer of 1 or more, got {log_interval!r}")

    history = [board]
    seen = {board: 0}
    cycle_start, period = None, None
    logging.info(f"Generation 0: population {board.population}")

    pbar = tqdm(range(1, generations + 1), desc="Simulating", unit="gen")
    for generation in pbar:
        board = board.next()
        history.append(board)

        if generation % log_interval == 0:
            logging.info(f"Generation {generation}: population {board.population}")

        if board in seen:
            if cycle_start is None:
                cycle_start, period = seen[board], generation - seen[board]
                logging.info(f"Board repeats generation {cycle_start} at generation {generation} (period {period}).")
            if stop_on_cycle:
                break
        else:
            seen[board] = generation
    pbar.close()

    return SimulationResult(history, cycle_start, period)
