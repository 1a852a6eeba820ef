"""Network and filesystem I/O for puzzle inputs."""
