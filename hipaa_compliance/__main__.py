"""Allow running as: python -m hipaa_compliance"""

from hipaa_compliance.main import cli

if __name__ == "__main__":
    cli()
