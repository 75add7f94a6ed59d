from sudoku_solver import Grid, Unsolvable, solve
from sudoku_solver.display import render_solution

givens = [
    [0, 2, 0, 0, 0, 6, 0, 8, 0],
    [0, 9, 6, 0, 1, 5, 0, 0, 2],
    [5, 0, 7, 0, 3, 0, 4, 0, 0],
    [0, 3, 0, 5, 0, 0, 0, 0, 4],
    [2, 0, 1, 4, 0, 8, 9, 0, 3],
    [8, 0, 0, 0, 0, 9, 0, 1, 0],
    [0, 0, 5, 0, 9, 0, 2, 0, 8],
    [9, 0, 0, 1, 8, 0, 3, 5, 0],
    [0, 6, 0, 2, 0, 0, 0, 9, 0],
]

board = Grid.construct(
    [[digit or None for digit in digits] for digits in givens]
)
print(board)

try:
    solved = solve(board)
except Unsolvable as e:
    print(e)
else:
    print(render_solution(board, solved))
