"""OrbCatch - catch falling orbs with a paddle."""
