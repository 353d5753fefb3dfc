from enum import Enum

class TransactionType(str, Enum):
    income = "Income"
    expense = "Expense"
