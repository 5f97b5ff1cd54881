"""wolgate — Wake-on-LAN command line tool and HTTP endpoint."""

__version__ = "0.1.0"
