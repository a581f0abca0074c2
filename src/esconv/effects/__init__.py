"""Effect size transforms and result construction."""

from .derived import cohens_f, eta_squared, hedges_g, lower_d, upper_d, z_critical  # noqa: F401
from .generic import assemble_result, esc_generic  # noqa: F401
