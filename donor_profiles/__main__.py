from donor_profiles.cli import app

app()
