from mulaw_codec.diagnostics.main import run

run()
