from tf_installer.cli import cli

cli()
