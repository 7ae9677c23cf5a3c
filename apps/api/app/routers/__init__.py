from app.routers import auth, categories, currents, custom_sections, debts, expenses, families, health, savings, summary

__all__ = [
    "health",
    "auth",
    "families",
    "categories",
    "expenses",
    "savings",
    "currents",
    "debts",
    "custom_sections",
    "summary",
]
