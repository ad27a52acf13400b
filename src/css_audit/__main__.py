from css_audit.cli.main import cli

cli(prog_name="css-audit")
