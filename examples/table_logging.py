#!/usr/bin/env python3
"""
Table Logging Example

Shows each data shape the table formatter understands.

Run:
    uv run python examples/table_logging.py
"""

from logger_pro import Logger


def main() -> None:
    log = Logger(tag="TableDemo", show_function_name=False, show_location=False)

    users = [
        {"id": 1, "name": "Alice", "age": 25, "city": "Boston"},
        {"id": 2, "name": "Bob", "age": 30, "city": "Seattle"},
        {"id": 3, "name": "Charlie", "age": 35},
    ]
    # List of mappings: sorted union of keys as columns
    log.table_info(users, label="User List")

    log.table_info(users, columns=["name", "city"], label="Users (Name & City Only)")

    # Single mapping: one row per key
    log.table_info(
        {"appName": "MyApp", "version": "1.2.0", "debug": False},
        label="App Configuration",
    )

    # List of lists: positional columns
    log.table_warn(
        [
            ["Product", "Price", "Stock"],
            ["Laptop", 999.99, 15],
            ["Mouse", 29.99],
        ],
        label="Product Inventory",
    )

    log.table_debug([1, "two", {"three": 3}, [4, 5], None], label="Mixed Values")


if __name__ == "__main__":
    main()
