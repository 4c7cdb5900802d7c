from knmaze.core.grid import Grid, Direction, OPPOSITE


class MazeAnalyzer:
    @staticmethod
    def count_exits(mask: int) -> int:
        c = 0
        if mask & Direction.NORTH: c += 1
        if mask & Direction.SOUTH: c += 1
        if mask & Direction.EAST: c += 1
        if mask & Direction.WEST: c += 1
        return c

    @staticmethod
    def calculate_stats(grid: Grid):
        dead_ends = 0     # 1 exit
        corridors = 0     # 2 exits
        junctions = 0     # 3+ exits
        isolated = 0      # 0 exits, only legal on a 1x1 grid

        for mask in grid.cells:
            exits = MazeAnalyzer.count_exits(mask)
            if exits == 0: isolated += 1
            elif exits == 1: dead_ends += 1
            elif exits == 2: corridors += 1
            else: junctions += 1

        total = grid.size
        return {
            "cells": total,
            "open_edges": sum(1 for _ in grid.open_edges()),
            "dead_ends": dead_ends,
            "corridors": corridors,
            "junctions": junctions,
            "isolated": isolated,
            "dead_end_percent": (dead_ends / total) * 100,
        }

    @staticmethod
    def is_symmetric(grid: Grid) -> bool:
        """Every open wall must be open from both sides, and never face off the grid."""
        for cell, mask in enumerate(grid.cells):
            valid = 0
            for neighbor, direction in grid.neighbors(cell):
                valid |= direction
                if bool(mask & direction) != bool(grid.cells[neighbor] & OPPOSITE[direction]):
                    return False
            if mask & ~valid & Grid.ALL_OPEN:
                return False
        return True

    @staticmethod
    def is_perfect(grid: Grid) -> bool:
        """
        True if the open passages form a spanning tree: walls consistent,
        exactly V-1 passages, and everything reachable from cell 0.
        """
        if not MazeAnalyzer.is_symmetric(grid):
            return False
        if sum(1 for _ in grid.open_edges()) != grid.size - 1:
            return False

        seen = bytearray(grid.size)
        seen[0] = 1
        stack = [0]
        reached = 1
        while stack:
            cell = stack.pop()
            for neighbor, direction in grid.neighbors(cell):
                if grid.cells[cell] & direction and not seen[neighbor]:
                    seen[neighbor] = 1
                    reached += 1
                    stack.append(neighbor)
        return reached == grid.size
