from vote_odds.cli import app

app(prog_name="vote-odds")
