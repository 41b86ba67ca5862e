"""payledger — interactive payroll ledger CLI."""

__version__ = "0.1.0"
