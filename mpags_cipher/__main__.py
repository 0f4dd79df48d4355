from mpags_cipher.cli import run

run()
