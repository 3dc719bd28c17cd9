from docsim.cli import app

app()
