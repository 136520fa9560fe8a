"""Holidays of Greece."""

from holical.holiday import Holiday, ObservanceType, calc_day_of_month, calc_easter_offset

_PUBLIC = ObservanceType.PUBLIC

PROTOXRONIA = Holiday(name="Xristougenna", type=_PUBLIC, month=1, day=1, func=calc_day_of_month)
THEOPHANIA = Holiday(name="Θεοφάνεια", type=_PUBLIC, month=1, day=6, func=calc_day_of_month)
KATHARA_DEFTERA = Holiday(
    name="Καθαρά Δευτέρα", type=_PUBLIC, offset=-48, julian=True, func=calc_easter_offset
)
IKOSTI_PEMPTI_MARTIOU = Holiday(
    name="Εικοστή Πέμπτη Μαρτίου", type=_PUBLIC, month=3, day=25, func=calc_day_of_month
)
MEGALI_PARASKEVI = Holiday(
    name="Μεγάλη Παρασκευή", type=_PUBLIC, offset=-2, julian=True, func=calc_easter_offset
)
DEFTERA_PASCHA = Holiday(
    name="Δευτέρα του Πάσχα", type=_PUBLIC, offset=1, julian=True, func=calc_easter_offset
)
ERGATIKI_PROTOMAGIA = Holiday(
    name="Εργατική Πρωτομαγιά", type=_PUBLIC, month=5, day=1, func=calc_day_of_month
)
AGIOU_PREVMATOS = Holiday(
    name="Αγίου Πνεύματος", type=_PUBLIC, offset=50, julian=True, func=calc_easter_offset
)
KIMISI_TIS_THEOTOKOU = Holiday(
    name="Κοίμηση της Θεοτόκου", type=_PUBLIC, month=8, day=15, func=calc_day_of_month
)
IMERA_TOU_OCHI = Holiday(
    name="Ημέρα του Όχι", type=_PUBLIC, month=10, day=28, func=calc_day_of_month
)
CHRISTOUGENNA = Holiday(
    name="Χριστούγεννα", type=_PUBLIC, month=12, day=25, func=calc_day_of_month
)
SINAXIS_YPERAGIAS_THEOTOKOU = Holiday(
    name="Σύναξις Υπεραγίας Θεοτόκου Μαρίας",
    type=_PUBLIC,
    month=12,
    day=26,
    func=calc_day_of_month,
)

HOLIDAYS = [
    PROTOXRONIA,
    THEOPHANIA,
    KATHARA_DEFTERA,
    IKOSTI_PEMPTI_MARTIOU,
    MEGALI_PARASKEVI,
    DEFTERA_PASCHA,
    ERGATIKI_PROTOMAGIA,
    AGIOU_PREVMATOS,
    KIMISI_TIS_THEOTOKOU,
    IMERA_TOU_OCHI,
    CHRISTOUGENNA,
    SINAXIS_YPERAGIAS_THEOTOKOU,
]