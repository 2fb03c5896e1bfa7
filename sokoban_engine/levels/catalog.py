from __future__ import annotations
from typing import Tuple

from ..parser import level_rows

# Levels are listed roughly from easiest to hardest.
_LEVEL_TEXTS: Tuple[str, ...] = (
# 0
"""
#####
#@$.#
#####
""",
# 1
"""
#######
#@ $ .#
#######
""",
# 2
"""
######
#@   #
# $$ #
# .. #
######
""",
# 3
"""
######
#.   #
#$ @ #
#    #
######
""",
# 4
"""
#######
#     #
# @$. #
#  $. #
#     #
#######
""",
# 5
"""
###
#.#
# #
#$#
#@#
###
""",
# 6
"""
########
#      #
# $$$  #
#      #
# ...  #
#   @  #
########
""",
# 7
"""
#########
#.     .#
#  $ $  #
#   @   #
#########
""",
# 8
"""
#######
#..$  #
# $   #
#   @ #
#######
""",
# 9
"""
######
#*@  #
# $. #
#    #
######
""",
# 10
"""
  ####
###  #
#@ $ #
#  . #
######
""",
# 11
"""
########
#  .#  #
# $    #
#   #$ #
#@  #. #
########
""",
# 12
"""
#######
#. . .#
#  $  #
# $@$ #
#     #
#######
""",
# 13
"""
#########
#@      #
# $ $ $ #
#       #
# . . . #
#########
""",
# 14
"""
######
#    #
#.$$.#
#    #
# @  #
######
""",
# 15
"""
#######
#    .#
#@ $  #
#   # #
# .$  #
#######
""",
# 16
"""
##########
#        #
#@$ $ $  #
#        #
# . . .  #
##########
""",
# 17
"""
#######
#.@   #
#$### #
#     #
#######
""",
# 18
"""
########
#..    #
#  $$  #
#  @   #
########
""",
# 19
"""
  #####
  #   #
###$  #
#@ .  #
#######
""",
# 20
"""
########
#.    .#
#  $$  #
#      #
#   @  #
########
""",
# 21
"""
#########
#   #   #
# $ . $ #
#@  #  .#
#########
""",
# 22
"""
######
#@   #
# $$ #
#  . #
# .  #
######
""",
# 23
"""
#######
#  .  #
# $#$ #
#  .  #
#  @  #
#######
""",
# 24
"""
########
#      #
# .$$. #
#      #
#  @   #
########
""",
# 25
"""
#########
#@      #
# $ # $ #
# . # . #
#########
""",
# 26
"""
  ######
  #  @ #
  # $  #
###  ###
#.  $  #
#  .   #
########
""",
# 27
"""
#######
#.#.#.#
#     #
# $$$ #
#  @  #
#######
""",
# 28
"""
########
#@     #
# $  $ #
# #..# #
#      #
########
""",
# 29
"""
#########
#   .   #
# # $ # #
#   @   #
#   $   #
#   .   #
#########
""",
# 30
"""
#######
#. $  #
#.$ @ #
#. $  #
#######
""",
# 31
"""
##########
#@       #
# $$$$   #
#        #
#  ....  #
##########
""",
# 32
"""
#######
#@ #  #
# $. $#
#  #  #
#    .#
#######
""",
# 33
"""
######
#    #
#@$*.#
#    #
#    #
######
""",
# 34
"""
########
#      #
# #$$# #
# .@ . #
#      #
########
""",
# 35
"""
  ####
  #. #
###$ #
#@ $.#
#    #
######
""",
# 36
"""
#########
#.  $  .#
#  $@$  #
#.  $  .#
#########
""",
# 37
"""
#######
#@    #
#.$$$.#
#  .  #
#######
""",
# 38
"""
########
#   #  #
# $ $ .#
#@  #  #
#.  #  #
########
""",
# 39
"""
#########
#       #
# * $.  #
#   @   #
#########
""",
# 40
"""
##########
#@       #
#  $  #  #
### # #$ #
#.   .   #
##########
""",
# 41
"""
#######
#     #
#.$@$.#
#     #
#######
""",
# 42
"""
########
#.     #
#$###  #
#  @ $ #
#    . #
########
""",
# 43
"""
#######
#. . .#
#$ $ $#
#  @  #
#######
""",
# 44
"""
#########
#..#    #
#   $$  #
#   #   #
#  @    #
#########
""",
# 45
"""
########
#      #
# $..$ #
# #@## #
#      #
########
""",
# 46
"""
#########
#.      #
# $ ### #
#   #.  #
# $@  $ #
#.      #
#########
""",
# 47
"""
##########
#  .  .  #
# $ ## $ #
#  @#    #
#   #    #
##########
""",
# 48
"""
###########
#@        #
# $ $ $ $ #
#         #
# . . . . #
###########
""",
# 49
"""
###########
#.   #   .#
# $  #  $ #
#    @    #
# $  #  $ #
#.   #   .#
###########
""",
)

LEVELS: Tuple[Tuple[str, ...], ...] = tuple(tuple(level_rows(text)) for text in _LEVEL_TEXTS)
LEVEL_COUNT = len(LEVELS)
FIRST_LEVEL = 0
LAST_LEVEL = LEVEL_COUNT - 1


def clamp_index(index: int) -> int:
    """Pins an index into [FIRST_LEVEL, LAST_LEVEL]."""
    return max(FIRST_LEVEL, min(LAST_LEVEL, index))


def get_level_rows(index: int) -> Tuple[str, ...]:
    """Rows of the catalog entry at the clamped index."""
    return LEVELS[clamp_index(index)]
