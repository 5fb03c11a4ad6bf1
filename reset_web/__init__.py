"""RESET Multiservicios marketing site and admin console."""
