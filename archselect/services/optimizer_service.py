"""Optimizer service - ILP and Greedy optimization for pattern selection."""
import logging
from typing import List, Dict, Tuple

from ortools.linear_solver import pywraplp

from archselect.models.decision import Decision
from archselect.models.matrix import Matrix
from archselect.models.settings import OptimizerMode

logger = logging.getLogger(__name__)


def row_score(
    columns: Dict[str, int],
    desired_qualities: List[str],
    column_weights: Dict[str, int],
) -> int:
    """Weighted score of one pattern row over the desired qualities only."""
    return sum(
        columns.get(q, 0) * column_weights.get(q, 0)
        for q in desired_qualities
    )


class Optimizer:
    """Optimizer for selecting architectural patterns using ILP or Greedy algorithms.

    Exactly one pattern is chosen per category. Categories never interact in
    the objective, so both modes reach the same total score.
    """

    SOLVER_ID = "SCIP"

    def optimize(
        self,
        mode: OptimizerMode,
        desired_qualities: List[str],
        matrix: Matrix,
        column_weights: Dict[str, int],
    ) -> Tuple[List[Decision], Dict[str, int]]:
        """
        Optimize pattern selection.

        Args:
            mode: Optimization mode (ILP or Greedy)
            desired_qualities: Quality attributes that count toward row scores
            matrix: Quality-pattern matrix
            column_weights: Normalized weight for each quality attribute

        Returns:
            Tuple of (list of decisions, satisfaction scores per quality).
            Both are empty when the ILP has no optimal solution.
        """
        if mode == OptimizerMode.ILP:
            return self._ilp(desired_qualities, matrix, column_weights)
        elif mode == OptimizerMode.GREEDY:
            return self._greedy(desired_qualities, matrix, column_weights)
        else:
            raise ValueError(f"Unsupported optimization mode: {mode}")

    def _greedy(
        self,
        desired_qualities: List[str],
        matrix: Matrix,
        column_weights: Dict[str, int],
    ) -> Tuple[List[Decision], Dict[str, int]]:
        """Greedy algorithm for pattern selection."""
        decisions = []

        for group in matrix.get_all_groups():
            best_score = float("-inf")
            best_pattern = None

            # Strict comparison keeps the first row on ties
            for pattern, columns in matrix.get_rows_by_group(group).items():
                score = row_score(columns, desired_qualities, column_weights)
                if score > best_score:
                    best_score = score
                    best_pattern = pattern

            if best_pattern is not None:
                decisions.append(self._build_decision(
                    group, best_pattern, matrix, desired_qualities, column_weights
                ))

        satisfaction_scores = self._calculate_satisfaction_scores(
            matrix, column_weights, decisions
        )

        return decisions, satisfaction_scores

    def _ilp(
        self,
        desired_qualities: List[str],
        matrix: Matrix,
        column_weights: Dict[str, int],
    ) -> Tuple[List[Decision], Dict[str, int]]:
        """Integer Linear Programming optimization."""
        # A fresh solver per call; nothing is shared between runs
        solver = pywraplp.Solver.CreateSolver(self.SOLVER_ID)

        if solver is None:
            logger.warning("Could not create %s solver.", self.SOLVER_ID)
            return [], {}

        # Create binary variables for each pattern
        variables = {}
        for pattern, _ in matrix.get_rows():
            variables[pattern] = solver.IntVar(0, 1, pattern)

        # Add constraint: exactly one pattern per group
        groups = matrix.get_all_groups()
        for group in groups:
            constraint = solver.Constraint(1, 1, f"OnlyOneRowInGroup_{group}")
            for pattern in matrix.get_rows_by_group(group):
                constraint.SetCoefficient(variables[pattern], 1)

        # Set objective: maximize weighted quality scores
        objective = solver.Objective()
        for pattern, columns in matrix.get_rows():
            objective.SetCoefficient(
                variables[pattern],
                row_score(columns, desired_qualities, column_weights),
            )
        objective.SetMaximization()

        status = solver.Solve()

        if status != pywraplp.Solver.OPTIMAL:
            logger.warning("The problem does not have an optimal solution (status %s).", status)
            return [], {}

        decisions = []
        for group in groups:
            for pattern in matrix.get_rows_by_group(group):
                if variables[pattern].solution_value() > 0.5:
                    decisions.append(self._build_decision(
                        group, pattern, matrix, desired_qualities, column_weights
                    ))
                    break

        logger.debug("ILP objective value: %s", objective.Value())

        satisfaction_scores = self._calculate_satisfaction_scores(
            matrix, column_weights, decisions
        )

        return decisions, satisfaction_scores

    def _build_decision(
        self,
        group: str,
        pattern: str,
        matrix: Matrix,
        desired_qualities: List[str],
        column_weights: Dict[str, int],
    ) -> Decision:
        columns = matrix.get_rows_by_group(group)[pattern]
        satisfied = []
        unsatisfied = []

        for col_name, col_value in columns.items():
            if col_name in desired_qualities:
                if col_value > 0:
                    satisfied.append((col_name, col_value))
                elif col_value < 0:
                    unsatisfied.append((col_name, col_value))

        return Decision(
            arch_pattern_name=group,
            selected_pattern=pattern,
            score=row_score(columns, desired_qualities, column_weights),
            satisfied_qualities=satisfied,
            unsatisfied_qualities=unsatisfied,
        )

    def _calculate_satisfaction_scores(
        self,
        matrix: Matrix,
        column_weights: Dict[str, int],
        decisions: List[Decision],
    ) -> Dict[str, int]:
        """Calculate overall satisfaction scores per quality attribute.

        Every attribute of a chosen row is counted, not only the desired ones.
        """
        satisfaction_scores = {}

        for decision in decisions:
            group_rows = matrix.get_rows_by_group(decision.arch_pattern_name)
            selected_row = group_rows.get(decision.selected_pattern)

            if selected_row:
                for col_name, col_value in selected_row.items():
                    if col_name not in satisfaction_scores:
                        satisfaction_scores[col_name] = 0

                    weight = column_weights.get(col_name, 0)
                    satisfaction_scores[col_name] += col_value * weight

        return satisfaction_scores
