"""Holidays of France."""

from holical.holiday import Holiday, ObservanceType, calc_day_of_month, calc_easter_offset

_PUBLIC = ObservanceType.PUBLIC

NOUVEL_AN = Holiday(name="Nouvel an", type=_PUBLIC, month=1, day=1, func=calc_day_of_month)
LUNDI_DE_PAQUES = Holiday(name="Lundi de Pâques", type=_PUBLIC, offset=1, func=calc_easter_offset)
FETE_DU_TRAVAIL = Holiday(
    name="Fête du Travail", type=_PUBLIC, month=5, day=1, func=calc_day_of_month
)
FETE_DE_LA_VICTOIRE = Holiday(
    name="Fête de la Victoire", type=_PUBLIC, month=5, day=8, func=calc_day_of_month
)
ASCENSION = Holiday(name="Ascension", type=_PUBLIC, offset=39, func=calc_easter_offset)
LUNDI_DE_PENTECOTE = Holiday(
    name="Lundi de Pentecôte", type=_PUBLIC, offset=50, func=calc_easter_offset
)
FETE_NATIONALE = Holiday(
    name="Fête Nationale", type=_PUBLIC, month=7, day=14, func=calc_day_of_month
)
ASSOMPTION = Holiday(name="Assomption", type=_PUBLIC, month=8, day=15, func=calc_day_of_month)
TOUSSAINT = Holiday(name="Toussaint", type=_PUBLIC, month=11, day=1, func=calc_day_of_month)
ARMISTICE_1918 = Holiday(
    name="Armistice de 1918", type=_PUBLIC, month=11, day=11, func=calc_day_of_month
)
NOEL = Holiday(name="Noël", type=_PUBLIC, month=12, day=25, func=calc_day_of_month)

HOLIDAYS = [
    NOUVEL_AN,
    LUNDI_DE_PAQUES,
    FETE_DU_TRAVAIL,
    FETE_DE_LA_VICTOIRE,
    ASCENSION,
    LUNDI_DE_PENTECOTE,
    FETE_NATIONALE,
    ASSOMPTION,
    TOUSSAINT,
    ARMISTICE_1918,
    NOEL,
]