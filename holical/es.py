"""Holidays of Spain."""

from holical.holiday import Holiday, ObservanceType, calc_day_of_month, calc_easter_offset

_PUBLIC = ObservanceType.PUBLIC

ANO_NUEVO = Holiday(name="Año Nuevo", type=_PUBLIC, month=1, day=1, func=calc_day_of_month)
REYES = Holiday(name="Día de Reyes", type=_PUBLIC, month=1, day=6, func=calc_day_of_month)
VIERNES_SANTO = Holiday(name="Viernes Santo", type=_PUBLIC, offset=-2, func=calc_easter_offset)
TRABAJADOR = Holiday(
    name="Día del Trabajador", type=_PUBLIC, month=5, day=1, func=calc_day_of_month
)
ASUNCION = Holiday(name="Asunción", type=_PUBLIC, month=8, day=15, func=calc_day_of_month)
FIESTA_NACIONAL_DE_ESPANA = Holiday(
    name="Fiesta Nacional de España", type=_PUBLIC, month=10, day=12, func=calc_day_of_month
)
TODOS_LOS_SANTOS = Holiday(
    name="Día de todos los Santos", type=_PUBLIC, month=11, day=1, func=calc_day_of_month
)
CONSTITUCION = Holiday(
    name="Día de la Constitución", type=_PUBLIC, month=12, day=6, func=calc_day_of_month
)
INMACULADA_CONCEPCION = Holiday(
    name="Inmaculada Concepción", type=_PUBLIC, month=12, day=8, func=calc_day_of_month
)
NAVIDAD = Holiday(name="Navidad", type=_PUBLIC, month=12, day=25, func=calc_day_of_month)

HOLIDAYS = [
    ANO_NUEVO,
    REYES,
    VIERNES_SANTO,
    TRABAJADOR,
    ASUNCION,
    FIESTA_NACIONAL_DE_ESPANA,
    TODOS_LOS_SANTOS,
    CONSTITUCION,
    INMACULADA_CONCEPCION,
    NAVIDAD,
]