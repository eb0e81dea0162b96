"""HTTP routers for the calculators, catalog and budget."""
