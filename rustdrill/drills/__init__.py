"""Worked Python answers to a selection of the exercises."""