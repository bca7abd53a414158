from byterange.cli import entrypoint


entrypoint()
