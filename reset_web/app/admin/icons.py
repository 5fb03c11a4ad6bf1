"""Symbolic icon names offered by the service and product forms."""

from dataclasses import dataclass
from typing import List, Optional

DEFAULT_ICON = "monitor"


@dataclass(frozen=True)
class IconOption:
    name: str
    category: str
    description: str


ICON_OPTIONS: List[IconOption] = [
    # Climatización
    IconOption("snowflake", "climatizacion", "Aire acondicionado / Refrigeración"),
    IconOption("zap", "climatizacion", "Sistemas eléctricos / Ventilación"),
    # Informática y redes
    IconOption("wifi", "informatica", "Redes inalámbricas / WiFi"),
    IconOption("monitor", "informatica", "Computadoras / Monitores"),
    IconOption("laptop", "informatica", "Laptops / Portátiles"),
    IconOption("smartphone", "informatica", "Smartphones / Móviles"),
    IconOption("cpu", "informatica", "Procesadores / Hardware"),
    IconOption("hard-drive", "informatica", "Almacenamiento / Discos"),
    IconOption("router", "informatica", "Routers / Equipos de red"),
    IconOption("server", "informatica", "Servidores / Sistemas"),
    IconOption("database", "informatica", "Bases de datos / Software"),
    IconOption("globe", "informatica", "Internet / Web"),
    IconOption("printer", "informatica", "Impresoras / Periféricos"),
    IconOption("keyboard", "informatica", "Teclados / Accesorios"),
    IconOption("mouse", "informatica", "Mouse / Periféricos"),
    IconOption("tablet", "informatica", "Tablets / Dispositivos móviles"),
    # Seguridad
    IconOption("camera", "seguridad", "Cámaras de seguridad / CCTV"),
    IconOption("shield", "seguridad", "Sistemas de seguridad / Alarmas"),
    IconOption("lock", "seguridad", "Control de acceso / Cerraduras"),
    # Mantenimiento
    IconOption("wrench", "mantenimiento", "Reparaciones generales"),
    IconOption("hammer", "mantenimiento", "Herramientas / Mantenimiento"),
    IconOption("settings", "mantenimiento", "Configuración / Ajustes"),
    IconOption("car", "mantenimiento", "Vehículos / Automotriz"),
    IconOption("home", "mantenimiento", "Hogar / Residencial"),
    # Electrónicos y entretenimiento
    IconOption("tv", "otros", "Televisores / Entretenimiento"),
    IconOption("radio", "otros", "Audio / Sonido"),
    IconOption("headphones", "otros", "Audio / Auriculares"),
    IconOption("gamepad", "otros", "Gaming / Videojuegos"),
    IconOption("watch", "otros", "Relojes / Wearables"),
    IconOption("phone", "otros", "Teléfonos / Comunicación"),
]


def find_icons(category: Optional[str] = None, search: str = "") -> List[IconOption]:
    term = search.strip().lower()
    return [
        option
        for option in ICON_OPTIONS
        if (not category or option.category == category)
        and (not term or term in option.name.lower() or term in option.description.lower())
    ]


def resolve_icon(name: Optional[str]) -> IconOption:
    """Return the option for ``name``, or the default icon if unknown."""
    for option in ICON_OPTIONS:
        if option.name == name:
            return option
    return next(o for o in ICON_OPTIONS if o.name == DEFAULT_ICON)
