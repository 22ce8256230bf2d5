"""Keyword tables for filtering and categorizing statement rows."""
from typing import Iterable, List, Sequence, Tuple

DEFAULT_CATEGORY = "Diğer"

# Categories a reviewer may move a transaction into
EXPENSE_CATEGORIES = [
    "Market",
    "Fatura",
    "Ulaşım",
    "Kira",
    "Sağlık",
    "Eğlence",
    "Kredi/Borç",
    "Taksit",
    "Giyim",
    "Yeme-İçme",
    "Eğitim",
    DEFAULT_CATEGORY,
]

# First matching keyword wins
CATEGORY_RULES: List[Tuple[str, str]] = [
    ("migros", "Market"),
    ("carrefour", "Market"),
    ("bim", "Market"),
    ("a101", "Market"),
    ("sok", "Market"),
    ("market", "Market"),
    ("restoran", "Yeme-İçme"),
    ("cafe", "Yeme-İçme"),
    ("starbucks", "Yeme-İçme"),
    ("yemek", "Yeme-İçme"),
    ("uber", "Ulaşım"),
    ("taksi", "Ulaşım"),
    ("marti", "Ulaşım"),
    ("otobus", "Ulaşım"),
    ("metro", "Ulaşım"),
    ("kira", "Kira"),
    ("fatura", "Fatura"),
    ("turkcell", "Fatura"),
    ("vodafone", "Fatura"),
    ("enerjisa", "Fatura"),
    ("iski", "Fatura"),
    ("zara", "Giyim"),
    ("h&m", "Giyim"),
    ("lcw", "Giyim"),
    ("giyim", "Giyim"),
    ("eczane", "Sağlık"),
    ("hastane", "Sağlık"),
    ("doktor", "Sağlık"),
    ("netflix", "Eğlence"),
    ("spotify", "Eğlence"),
    ("youtube", "Eğlence"),
    ("sinema", "Eğlence"),
    ("okul", "Eğitim"),
    ("kurs", "Eğitim"),
    ("kitap", "Eğitim"),
]

# Statement metadata rows, not purchases. Variants without Turkish letters
# cover descriptions where the extractor dropped them.
INFORMATIONAL_KEYWORDS = [
    "hesap kesim",
    "son ödeme",
    "son deme",
    "toplam borç",
    "asgari ödeme",
    "asgari deme",
    # ".{1,3}deme" repair eats the letter before the space
    "so ödeme",
    "asgar ödeme",
    "devreden",
    "limit",
    "puan",
    "önceki dönem",
    "nceki dnem",
]


class TransactionClassifier:
    """Filters informational rows and assigns categories by keyword."""

    def __init__(
        self,
        rules: Sequence[Tuple[str, str]] = CATEGORY_RULES,
        informational_keywords: Iterable[str] = INFORMATIONAL_KEYWORDS,
        default_category: str = DEFAULT_CATEGORY
    ):
        self.rules = list(rules)
        self.informational_keywords = list(informational_keywords)
        self.default_category = default_category

    def is_informational(self, description: str) -> bool:
        lowered = description.lower()
        return any(keyword in lowered for keyword in self.informational_keywords)

    @staticmethod
    def is_negative(line: str, raw_amount: str) -> bool:
        """Refunds and payments carry a minus sign before the amount."""
        return f"-{raw_amount}" in line or line.startswith("-")

    def categorize(self, description: str) -> str:
        lowered = description.lower()
        for keyword, category in self.rules:
            if keyword in lowered:
                return category
        return self.default_category
