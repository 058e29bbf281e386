from kubeconsole.cli import app

app()
