from hero_pnl.cli import app

app()
