"""Turkish text repair for statement descriptions extracted from PDFs."""
import re
from typing import Iterable, List, Pattern, Tuple

from statementflow.utils import get_logger

logger = get_logger()

RepairRule = Tuple[Pattern, str]


def _compile(rules: Iterable[Tuple[str, str]]) -> List[RepairRule]:
    return [(re.compile(pattern), replacement) for pattern, replacement in rules]


class TurkishNormalizer:
    """Repairs known encoding corruption in statement descriptions.

    Rules are applied in list order; later rules rely on earlier ones having
    already fired, so new rules go at the end unless they are known to be
    independent.
    """

    # Latin-1 glyphs that the extractor emits in place of Turkish letters
    CHARACTER_FIXES = _compile([
        (r"Ð", "Ğ"),
        (r"Ý", "İ"),
        (r"Þ", "Ş"),
        (r"ð", "ğ"),
        (r"ý", "ı"),
        (r"þ", "ş"),
    ])

    # Garbled tokens observed in real statements. ".{1,3}" absorbs the
    # replacement boxes/spaces left where a Turkish letter was dropped.
    MERCHANT_FIXES = _compile([
        (r"K.{1,3}k.{1,3}Kaya", "Küçük Kaya"),
        (r".{1,3}lem", "İşlem"),
        (r"Aıklaması", "Açıklaması"),
        (r"Dnem", "Dönem"),
        (r".{1,3}deme", " Ödeme"),
        (r"Tesekkr", "Teşekkür"),
        (r".{1,3}TLEK", "ÇİTLEK"),
        (r"MA.{1,3}AZACILIK", "MAĞAZACILIK"),
        (r"A.{1,3}DA.{1,3}MARKET", "ÇAĞDAŞ MARKET"),
        (r"BAHCELIEVLER", "BAHÇELİEVLER"),
        (r".{0,3}NSALLAR", "ÜNSALLAR"),
        (r".{0,3}ZAYDOS", "ÖZAYDOS"),
        (r"VERO.{1,3}LU", "VEROĞLU"),
        (r"MAM.{1,3}LLER", "MAMÜLLER"),
        (r"\sN\s\.", " İNŞ."),
        (r"N.{1,3}SAN.{1,3}T", "İNŞ SAN T"),
        (r"KO.{1,3}CA.{1,3}KEBAP", "KOÇ CAĞ KEBAP"),
        (r"KUAF.{1,3}R.{1,3}G.{1,3}ROL", "KUAFÖR GÜROL"),
        (r"AH.{1,3}NLERTEK", "ŞAHİNLER TEK"),
        (r"GRAT.{1,3}S", "GRATİS"),
        # \b is Unicode-aware, so a following Turkish letter blocks these
        (r"PASTANES\b", "PASTANESİ"),
        (r"ROSSM\b", "ROSSMANN"),
        (r"GI$", "GIDA"),
        (r"D.{1,3}RK", "DİREK"),
        (r".{0,3}ANSERA", "ANSERA"),
        (r"P.{1,3}KN.{1,3}K", "PİKNİK"),
        (r"FAT.{1,3}H", "FATİH"),
        (r"N.{1,3}AAT", "İNŞAAT"),
        (r"GRATİSANKAMALL", "GRATİS ANKAMALL"),
        (r"GUNGORANKAMALL", "GUNGOR ANKAMALL"),
        (r"Al.{1,3}veri", "Alışveriş"),
    ])

    def __init__(self, extra_rules: Iterable[Tuple[str, str]] = ()):
        """
        Initialize normalizer.

        Args:
            extra_rules: Additional (pattern, replacement) pairs applied
                after the built-in rules
        """
        self.rules: List[RepairRule] = (
            list(self.CHARACTER_FIXES) + list(self.MERCHANT_FIXES) + _compile(extra_rules)
        )

    def repair(self, text: str) -> str:
        """
        Apply every repair rule in order.

        Args:
            text: Raw description text

        Returns:
            Text with known corruptions replaced
        """
        for pattern, replacement in self.rules:
            text = pattern.sub(replacement, text)
        return text

    def clean_description(self, text: str) -> str:
        """
        Repair and tidy a transaction description.

        Args:
            text: Description as cut from the statement line

        Returns:
            Cleaned description (may be empty)
        """
        if not text:
            return ""

        cleaned = self.repair(text)
        cleaned = self._clean_whitespace(cleaned)
        cleaned = re.sub(r"-+", "", cleaned).strip()

        if cleaned != text:
            logger.debug(f"Cleaned description {text!r} -> {cleaned!r}")
        return cleaned

    @staticmethod
    def _clean_whitespace(text: str) -> str:
        """Collapse whitespace runs to a single space."""
        return re.sub(r"\s+", " ", text)
