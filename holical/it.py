"""Holidays of Italy."""

from holical.holiday import Holiday, ObservanceType, calc_day_of_month, calc_easter_offset

_PUBLIC = ObservanceType.PUBLIC

CAPODANNO = Holiday(name="Capodanno", type=_PUBLIC, month=1, day=1, func=calc_day_of_month)
EPIFANIA = Holiday(name="Epifania", type=_PUBLIC, month=1, day=6, func=calc_day_of_month)
PASQUETTA = Holiday(name="Pasquetta", type=_PUBLIC, offset=1, func=calc_easter_offset)
FESTA_DELLA_LIBERAZIONE = Holiday(
    name="Festa della Liberazione", type=_PUBLIC, month=4, day=25, func=calc_day_of_month
)
FESTA_DEL_LAVORO = Holiday(
    name="Festa del Lavoro", type=_PUBLIC, month=5, day=1, func=calc_day_of_month
)
FESTA_DELLA_REPUBBLICA = Holiday(
    name="Festa della Repubblica", type=_PUBLIC, month=6, day=2, func=calc_day_of_month
)
ASSUNZIONE = Holiday(name="Assunzione", type=_PUBLIC, month=8, day=15, func=calc_day_of_month)
TUTTI_I_SANTI = Holiday(name="Tutti i santi", type=_PUBLIC, month=11, day=1, func=calc_day_of_month)
IMMACOLATA = Holiday(
    name="Immacolata Concezione", type=_PUBLIC, month=12, day=8, func=calc_day_of_month
)
NATALE = Holiday(name="Natale", type=_PUBLIC, month=12, day=25, func=calc_day_of_month)
SANTO_STEFANO = Holiday(
    name="Santo Stefano", type=_PUBLIC, month=12, day=26, func=calc_day_of_month
)

HOLIDAYS = [
    CAPODANNO,
    EPIFANIA,
    PASQUETTA,
    FESTA_DELLA_LIBERAZIONE,
    FESTA_DEL_LAVORO,
    FESTA_DELLA_REPUBBLICA,
    ASSUNZIONE,
    TUTTI_I_SANTI,
    IMMACOLATA,
    NATALE,
    SANTO_STEFANO,
]