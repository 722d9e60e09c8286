from scriptkit.pattern.matcher import Regex, find, gmatch, gsplit, gsub, match, split

__all__ = ['Regex', 'find', 'match', 'gmatch', 'gsub', 'gsplit', 'split']
