"""Тексты справки."""

from __future__ import annotations

from typing import Final

MAIN_USAGE: Final[str] = """
Usage: \tboxi <command> [subCommand]

Clear up Docker resources

Commands:
  con, container, containers    Container commands
  vol, volume, volumes          Volume commands
  img, image, images            Image commands
  wipe                          Clean up containers and volumes
  purge                         Clean up containers, volumes, images, networks and the build cache

Run 'boxi <command> --help' for more information."""

CONTAINER_USAGE: Final[str] = """
Usage: \tboxi [con|container|containers] <command>

Clear up Docker container resources

Commands:
  stop     Stop all running containers
  rm       Remove all stopped containers
  clean    Stop and remove all running containers"""

VOLUME_USAGE: Final[str] = """
Usage: \tboxi [vol|volume|volumes] <command>

Clear up Docker volume resources

Commands:
  rm    Remove all dangling volumes"""

IMAGE_USAGE: Final[str] = """
Usage: \tboxi [img|image|images] <command>

Clear up Docker image resources

Commands:
  rm    Remove all dangling images
  rmf   Force remove all dangling images"""
