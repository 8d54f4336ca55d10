"""workhook command line interface."""
