"""
Local datasets used when the backend cannot be reached.

The services and products stores fall back to these lists so the public
pages still show the catalog; the carousel engine shows the static
slides before it is mounted and whenever no remote slide is available.
"""

from typing import List

from reset_web.app.schemas.product import Product
from reset_web.app.schemas.service import Service

PLACEHOLDER_IMAGE = "/placeholder.svg?height=600&width=1200"


def default_services() -> List[Service]:
    return [
        Service(
            id="1",
            name="Sistemas de Seguridad",
            description="Cámaras IP, CCTV, alarmas y control de acceso",
            price=299,
            category="seguridad",
            icon="shield",
            estimated_duration=120,
            features=["Cámaras HD/4K", "Monitoreo remoto", "Grabación en la nube", "Instalación profesional"],
        ),
        Service(
            id="2",
            name="Aires Acondicionados",
            description="Instalación, reparación y mantenimiento",
            price=599,
            category="climatizacion",
            icon="snowflake",
            estimated_duration=180,
            features=["Todas las marcas", "Servicio 24/7", "Repuestos originales", "Garantía extendida"],
        ),
        Service(
            id="3",
            name="Servicios de Informática",
            description="Soporte técnico y soluciones IT",
            price=149,
            category="informatica",
            icon="monitor",
            estimated_duration=90,
            features=["Reparación de PC", "Redes y WiFi", "Software y hardware", "Consultoría IT"],
        ),
        Service(
            id="4",
            name="Reparaciones Generales",
            description="Mantenimiento integral para hogar y negocio",
            price=99,
            category="mantenimiento",
            icon="wrench",
            estimated_duration=60,
            features=["Electricidad", "Plomería", "Carpintería", "Pintura y acabados"],
        ),
    ]


def default_products() -> List[Product]:
    return [
        Product(
            id="1",
            name="Cámara IP 4K",
            description="Cámara de seguridad con resolución 4K",
            price=299,
            category="seguridad",
            icon="camera",
            stock=15,
            features=["Resolución 4K", "Visión nocturna", "Audio bidireccional", "Resistente al agua"],
        ),
        Product(
            id="2",
            name="Kit de 4 Cámaras",
            description="Kit completo de videovigilancia",
            price=899,
            category="seguridad",
            icon="camera",
            stock=8,
            features=["4 cámaras HD", "DVR incluido", "Cables y accesorios", "App móvil gratuita"],
        ),
        Product(
            id="3",
            name="Aire Split 12000 BTU",
            description="Aire acondicionado Split inverter",
            price=599,
            category="climatizacion",
            icon="snowflake",
            stock=12,
            features=["Inverter", "Bajo consumo", "Control remoto", "Instalación incluida"],
        ),
        Product(
            id="4",
            name="Sistema de Alarma",
            description="Sistema de alarma inalámbrico",
            price=399,
            category="seguridad",
            icon="shield",
            stock=20,
            features=["Sensores inalámbricos", "Panel táctil", "Notificaciones móvil", "Batería de respaldo"],
        ),
    ]
