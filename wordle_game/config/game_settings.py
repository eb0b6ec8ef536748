"""
Game Configuration Constants Module

This module defines all game rule constants. All game parameters are
centralized here to enable easy modification.
"""

import json
import os
from typing import Dict, List, Final

# Core Game Configuration Constants
WORD_LENGTH: Final[int] = 5
"""
Number of letters in every target word and guess.
Type: Final[int] - Immutable to prevent accidental modification
"""

MAX_ROWS: Final[int] = 6
"""
Maximum number of guess attempts allowed per game.
Type: Final[int] - Immutable to prevent accidental modification
"""

SUBMIT_KEY: Final[str] = "ENTER"
BACKSPACE_KEY: Final[str] = "BACKSPACE"

# On-screen keyboard layout, the submit and backspace keys sit on the last row
KEYBOARD_ROWS: Final[List[List[str]]] = [
    list("QWERTYUIOP"),
    list("ASDFGHJKL"),
    [SUBMIT_KEY] + list("ZXCVBNM") + [BACKSPACE_KEY],
]

# Examples shown by the "how to play" dialog: the letter at `index` is
# highlighted with its status when `word` is scored against `target`
TUTORIAL_EXAMPLES: Final[List[Dict]] = [
    {"word": "CAMPO", "target": "CRANE", "index": 0},
    {"word": "POLLO", "target": "STONE", "index": 1},
    {"word": "BARCO", "target": "STONE", "index": 3},
]


# Load word list from JSON file
def _load_word_list() -> List[str]:
    """
    Load word list from wordles.json file.
    
    Returns:
        List[str]: List of uppercase 5-letter words
        
    Raises:
        FileNotFoundError: If wordles.json file is not found
        ValueError: If the JSON is malformed, the word list is empty or contains invalid words
    """
    config_dir = os.path.dirname(os.path.abspath(__file__))
    json_file_path = os.path.join(config_dir, 'wordles.json')
    
    try:
        with open(json_file_path, 'r', encoding='utf-8') as f:
            word_list = json.load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Word list file not found: {json_file_path}")
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in wordles.json: {e}")
        
    if not isinstance(word_list, list):
        raise ValueError("JSON file must contain an array of words")
        
    if not word_list:
        raise ValueError("Word list cannot be empty")
        
    # Convert all words to uppercase and validate
    uppercase_words = [word.upper() for word in word_list]
    
    for word in uppercase_words:
        if len(word) != WORD_LENGTH:
            raise ValueError(f"Word '{word}' is not {WORD_LENGTH} characters long")
        if not word.isalpha():
            raise ValueError(f"Word '{word}' contains non-alphabetic characters")
            
    return uppercase_words

# Curated Word Database loaded from JSON file
WORD_LIST: Final[List[str]] = _load_word_list()


def validate_word_list_integrity(word_list: List[str] = WORD_LIST) -> bool:
    """
    Validates the integrity and consistency of the word database.
    
    This function performs validation to ensure:
    1. Length validation: All words must be exactly WORD_LENGTH characters
    2. Character validation: Only alphabetic characters allowed
    3. Uniqueness validation: No duplicate entries
    4. Format validation: Consistent uppercase formatting
    
    Returns:
        bool: True if word list passes all validation checks
        
    Raises:
        ValueError: If any validation check fails with detailed error message
    """
    if not word_list:
        raise ValueError("Word list cannot be empty")
    
    for index, word in enumerate(word_list):
        if len(word) != WORD_LENGTH:
            raise ValueError(f"Word at index {index} '{word}' is not {WORD_LENGTH} characters long")
        
        if not word.isalpha():
            raise ValueError(f"Word at index {index} '{word}' contains non-alphabetic characters")
        
        if not word.isupper():
            raise ValueError(f"Word at index {index} '{word}' is not in uppercase format")
    
    if len(word_list) != len(set(word_list)):
        seen = set()
        duplicates = sorted({word for word in word_list if word in seen or seen.add(word)})
        raise ValueError(f"Duplicate words found in word list: {duplicates}")
    
    return True


def get_word_statistics(word_list: List[str] = WORD_LIST) -> dict:
    """
    Analyzes word list and returns statistical information.
    
    Returns:
        dict: total_words, avg_vowel_count, letter_frequency and the five
        most common letters
    """
    if not word_list:
        return {"error": "Word list is empty"}
    
    vowels = set('AEIOU')
    total_vowels = sum(len([char for char in word if char in vowels]) for word in word_list)
    
    letter_frequency = {}
    for word in word_list:
        for char in word:
            letter_frequency[char] = letter_frequency.get(char, 0) + 1
    
    return {
        "total_words": len(word_list),
        "avg_vowel_count": round(total_vowels / len(word_list), 2),
        "letter_frequency": letter_frequency,
        "most_common_letters": sorted(letter_frequency.items(), key=lambda x: x[1], reverse=True)[:5]
    }


if __name__ == "__main__":

    try:
        validate_word_list_integrity()
        print(" Word list validation passed")
        
        stats = get_word_statistics()
        print(f" Game statistics: {stats}")
        
        print(" All configuration validation checks passed")
    except ValueError as config_error:
        print(f" Configuration validation failed: {config_error}")
        exit(1)
