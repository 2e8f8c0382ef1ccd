"""gapihub - Google API hubs.

Package containing:
- gapihub.sdk: Request pipeline shared by every API hub
- gapihub.apis: Per-API hubs (Chrome Management, Billing Budgets, Custom Search)
- gapihub.cli: Command-line interface
"""

__version__ = "0.3.1"
