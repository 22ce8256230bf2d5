"""Transaction grouping by category."""
from dataclasses import replace
from typing import List, Optional

from .classifier import EXPENSE_CATEGORIES
from .models import GroupedExpense, ParsedTransaction, TotalComparison
from statementflow.utils import get_logger, ValidationError

logger = get_logger()


class Aggregator:
    """Aggregates transactions by category."""

    def __init__(self, categories: Optional[List[str]] = None):
        """
        Initialize aggregator.

        Args:
            categories: Categories allowed when a reviewer moves a transaction
        """
        self.categories = categories if categories is not None else list(EXPENSE_CATEGORIES)

    def group(self, transactions: List[ParsedTransaction]) -> List[GroupedExpense]:
        """
        Group transactions by category, in order of first appearance.

        Args:
            transactions: Accepted transactions

        Returns:
            One GroupedExpense per category
        """
        groups = {}
        for txn in transactions:
            if txn.category not in groups:
                groups[txn.category] = GroupedExpense(category=txn.category)
            groups[txn.category].add(txn)

        logger.info(f"Grouped {len(transactions)} transactions into {len(groups)} categories")
        return list(groups.values())

    @staticmethod
    def parsed_total(groups: List[GroupedExpense]) -> float:
        return sum(g.total_amount for g in groups)

    def compare_with_statement_total(
        self,
        groups: List[GroupedExpense],
        statement_total: float,
        tolerance: float = 1.0
    ) -> TotalComparison:
        """
        Cross-check grouped amounts against the statement's printed total.

        Args:
            groups: Grouped expenses
            statement_total: Total found on the statement
            tolerance: Largest difference not reported as a mismatch

        Returns:
            TotalComparison
        """
        parsed = self.parsed_total(groups)
        difference = round(parsed - statement_total, 2)
        comparison = TotalComparison(
            parsed_total=parsed,
            statement_total=statement_total,
            difference=difference,
            is_mismatch=abs(difference) > tolerance
        )

        if comparison.is_mismatch:
            logger.warning(
                f"Parsed total {parsed:.2f} differs from statement total "
                f"{statement_total:.2f} by {difference:.2f}"
            )
        return comparison

    def update_transaction(
        self,
        groups: List[GroupedExpense],
        group_index: int,
        transaction_index: int,
        updated: ParsedTransaction
    ) -> List[GroupedExpense]:
        """
        Replace a transaction, moving it to another group if its category changed.

        Args:
            groups: Current groups (left untouched)
            group_index: Index of the group holding the transaction
            transaction_index: Index within that group
            updated: Edited transaction

        Returns:
            New list of groups
        """
        old_group = self._get_group(groups, group_index, transaction_index)
        old_txn = old_group.transactions[transaction_index]

        if updated.category not in self.categories:
            raise ValidationError(f"Unknown category: {updated.category}")

        new_groups = list(groups)

        if updated.category == old_txn.category:
            transactions = list(old_group.transactions)
            transactions[transaction_index] = updated
            new_groups[group_index] = self._rebuild(old_group.category, transactions)
            return new_groups

        remaining = [t for i, t in enumerate(old_group.transactions) if i != transaction_index]
        if remaining:
            new_groups[group_index] = self._rebuild(old_group.category, remaining)
        else:
            del new_groups[group_index]

        for i, group in enumerate(new_groups):
            if group.category == updated.category:
                new_groups[i] = self._rebuild(group.category, group.transactions + [updated])
                break
        else:
            new_groups.append(self._rebuild(updated.category, [updated]))

        logger.debug(f"Moved transaction {updated.description!r} from {old_txn.category} to {updated.category}")
        return new_groups

    def remove_transaction(
        self,
        groups: List[GroupedExpense],
        group_index: int,
        transaction_index: int
    ) -> List[GroupedExpense]:
        """
        Remove a transaction, dropping its group when it becomes empty.

        Returns:
            New list of groups
        """
        group = self._get_group(groups, group_index, transaction_index)
        remaining = [t for i, t in enumerate(group.transactions) if i != transaction_index]

        new_groups = list(groups)
        if remaining:
            new_groups[group_index] = self._rebuild(group.category, remaining)
        else:
            del new_groups[group_index]
        return new_groups

    @staticmethod
    def recategorize(transaction: ParsedTransaction, category: str) -> ParsedTransaction:
        return replace(transaction, category=category)

    @staticmethod
    def _rebuild(category: str, transactions: List[ParsedTransaction]) -> GroupedExpense:
        group = GroupedExpense(category=category)
        for txn in transactions:
            group.add(txn)
        return group

    @staticmethod
    def _get_group(groups: List[GroupedExpense], group_index: int, transaction_index: int) -> GroupedExpense:
        if not 0 <= group_index < len(groups):
            raise ValidationError(f"No group at index {group_index}")
        group = groups[group_index]
        if not 0 <= transaction_index < len(group.transactions):
            raise ValidationError(f"No transaction at index {transaction_index} in {group.category}")
        return group
