"""Physics calculations for heat-load estimation."""

from heatload.physics.thermal import (
    round_half_up,
    round_up,
    calculate_envelope_gain,
    calculate_sensible_heat,
    calculate_latent_heat,
    calculate_airflow_for_sensible,
    calculate_air_change_airflow,
    convert_kw_to_btu,
    convert_watts_to_btu,
    convert_btu_to_tons,
)

__all__ = [
    "round_half_up",
    "round_up",
    "calculate_envelope_gain",
    "calculate_sensible_heat",
    "calculate_latent_heat",
    "calculate_airflow_for_sensible",
    "calculate_air_change_airflow",
    "convert_kw_to_btu",
    "convert_watts_to_btu",
    "convert_btu_to_tons",
]
