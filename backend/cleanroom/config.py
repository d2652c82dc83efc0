"""
Cleanroom HVAC configuration and constants.
"""

from pydantic import BaseModel

# Default atmospheric pressure at sea level
DEFAULT_PRESSURE_IP = 14.696  # psia

# Grains per lb conversion
GRAINS_PER_LB = 7000.0


class HVACConstants(BaseModel):
    """Physical constants and conversion factors used by the load formulas."""

    model_config = {"frozen": True}

    air_density: float = 0.075                # lb/ft³ at standard conditions
    air_specific_heat: float = 0.24           # BTU/(lb·°F)
    latent_heat_vaporization: float = 1060.0  # BTU/lb
    standard_temp_f: float = 70.0
    standard_pressure: float = DEFAULT_PRESSURE_IP  # psia

    btu_per_tr: float = 12000.0          # 1 TR = 12,000 BTU/hr
    cfm_to_ls: float = 0.471947          # 1 CFM = 0.471947 L/s
    gpm_to_ls: float = 0.0630902         # 1 gal/min = 0.0630902 L/s
    ft_to_m: float = 0.3048
    m3_to_ft3: float = 35.3147
    watts_to_btuh: float = 3.412
    kw_to_btuh: float = 3412.0
    hp_to_kw: float = 0.746

    people_sensible_btuh: float = 250.0  # per occupant
    people_latent_btuh: float = 200.0    # per occupant
    latent_grains_factor: float = 0.68

    chilled_water_base_delta_f: float = 10.0  # 1 GPM/TR at this ΔT
    fan_constant: float = 6356.0
    fan_efficiency: float = 0.7


DEFAULT_CONSTANTS = HVACConstants()

# Design pipe size steps: (inclusive upper bound in GPM, nominal size in inches).
# Flows above the last bound get LARGEST_PIPE_INCH.
PIPE_SIZE_SCHEDULE: tuple[tuple[float, float], ...] = (
    (10.0, 0.75),
    (25.0, 1.0),
    (50.0, 1.5),
    (100.0, 2.0),
    (200.0, 2.5),
)
LARGEST_PIPE_INCH = 3.0

# Prefix of generated AHU identifiers, e.g. "ACAHU-001"
AHU_PREFIX = "ACAHU"

# Air changes per hour by cleanroom classification and regulatory standard.
# Values are kept as published: single numbers, ranges, or "ULPA" where the
# grade is sized by unidirectional flow instead of air changes.
CLASS_AIR_CHANGES: dict[str, dict[str, str]] = {
    "Grade D (ISO 7 at Rest & ISO 8 in Oper.)": {
        "EUGMP": "20-25",
        "WHO": "20",
        "TGA": "20",
    },
    "Grade C (ISO 7 at Rest & ISO 7 in Oper.)": {
        "EUGMP": "40-50",
        "WHO": "40",
        "TGA": "40",
    },
    "Grade B (ISO 5 at Rest & ISO 7 in Oper.)": {
        "EUGMP": "60-80",
        "WHO": "60",
        "TGA": "60",
    },
    "Grade A (ISO 5 at Rest & ISO 5 in Oper.)": {
        "EUGMP": "ULPA",
        "WHO": "ULPA",
        "TGA": "ULPA",
    },
    "3500 K": {"TGA": "20"},
    "350 J": {"TGA": "40"},
    "35 G or H": {"TGA": "60"},
    "3.5 E or F": {"TGA": "ULPA"},
}
AIR_CHANGES_FALLBACK_STANDARD = "EUGMP"
AIR_CHANGES_NOT_AVAILABLE = "N/A"

# Name of the exported calculation sheet
CSV_FILENAME = "hvac-calculations.csv"

# CORS — allow local frontend dev server
CORS_ORIGINS = [
    "http://localhost:5173",  # Vite default
    "http://localhost:3000",
    "http://127.0.0.1:5173",
    "http://127.0.0.1:3000",
]
