"""Domain type definitions for gastos.

These NewTypes provide semantic clarity and help with type checking:
- Money: Amount in reais (decimal, stored as float)
- CategoryName: Name of an expense category
- ExpenseId: Unique, monotonically increasing expense identifier
- Screen: Identifier of an application screen
"""

from typing import NewType

# Money amounts are plain decimals; the app never deals in minor units
Money = NewType("Money", float)

# Category name, e.g. "Alimentação"
CategoryName = NewType("CategoryName", str)

# Expense ids are creation timestamps in milliseconds, bumped when they collide
ExpenseId = NewType("ExpenseId", int)

# Screen identifier, e.g. "dashboard"
Screen = NewType("Screen", str)
