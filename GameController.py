from GameOfLife import Board

ALIVE_GLYPH = "•"
DEAD_GLYPH = " "

# Seed patterns, any character other than a space is a live cell
PATTERNS = {
    'block': [
        "    ",
        " ## ",
        " ## ",
        "    ",
    ],
    'beehive': [
        "      ",
        "  ##  ",
        " #  # ",
        "  ##  ",
        "      ",
    ],
    'tub': [
        "     ",
        "  #  ",
        " # # ",
        "  #  ",
        "     ",
    ],
    'blinker': [
        "     ",
        "  #  ",
        "  #  ",
        "  #  ",
        "     ",
    ],
    'beacon': [
        "      ",
        " ##   ",
        " ##   ",
        "   ## ",
        "   ## ",
    ],
    'glider': [
        "        ",
        "  #     ",
        "   #    ",
        " ###    ",
        "        ",
        "        ",
        "        ",
        "        ",
    ],
}


def board_from_text(lines, dead=DEAD_GLYPH):
    """
    Turn text art into a Board, one line per row.

    Args:
        lines: iterable of strings, lines may differ in length
        dead: the character marking a dead cell, anything else is alive
    """
    return Board([char != dead for char in line] for line in lines)


def board_to_text(board, alive=ALIVE_GLYPH, dead=DEAD_GLYPH):
    return ["".join(alive if cell else dead for cell in row) for row in board.current_state()]


def load_pattern(name):
    key = name.strip().lower()
    if key not in PATTERNS:
        raise ValueError(f"Unknown pattern '{name}', choose one of: {', '.join(sorted(PATTERNS))}")
    return board_from_text(PATTERNS[key])


class GameController:
    @staticmethod
    def getValidPattern():
        while True:
            try:
                name = input(f"Enter a pattern ({', '.join(sorted(PATTERNS))}): ")
                return name.strip().lower(), load_pattern(name)
            except ValueError as e:
                print(e)

    @staticmethod
    def getValidGenerations():
        while True:
            try:
                generations = int(input("Enter number of generations: "))
                if generations >= 0:
                    return generations
                else:
                    print(f"Number of generations equals {generations}. Enter a value of 0 or more to continue.")
            except ValueError:
                print("Please enter a valid integer.")

    @staticmethod
    def getValidLogInterval():
        while True:
            try:
                interval = int(input("Log every how many generations: "))
                if interval >= 1:
                    return interval
                else:
                    print("Please enter a value of 1 or more.")
            except ValueError:
                print("Please enter a valid integer.")
