# -*- coding: utf-8 -*-
"""
Let the search engine play the sliding-tile game.
"""
import logging
from collections import Counter
from pathlib import Path
from typing import Dict, Optional

from tqdm import trange

from game_search import Algorithm, SearchConfig, SearchEngine
from slidingtiles.envs import TileGame
from slidingtiles.utils import GameStorage

logger = logging.getLogger(__name__)


def play_game(game: TileGame, engine: SearchEngine, max_moves: Optional[int] = None, keep_playing: bool = True) -> int:
    """
    Play until the game ends.

    Parameters
    ----------
    game : TileGame
        The game to play, mutated in place.
    engine : SearchEngine
        The engine choosing the moves.
    max_moves : int, optional
        Stop after this many moves.
    keep_playing : bool, optional
        Continue after reaching the winning tile (default is True).

    Returns
    -------
    int
        The number of moves played.
    """
    moves = 0
    while max_moves is None or moves < max_moves:
        if game.won and keep_playing and not game.keep_playing_flag:
            game.keep_playing()
        if game.is_terminated:
            break

        # ##: One tick: search on the live board, then apply.
        engine.board = game.board
        game.step(engine.best_move())
        moves += 1
    return moves


def evaluate(
    config: SearchConfig,
    length: int = 10,
    seed: Optional[int] = None,
    state_file: Optional[Path] = None,
    max_moves: Optional[int] = None,
) -> Dict[int, int]:
    """
    Play several games with one configuration.

    Parameters
    ----------
    config : SearchConfig
        The search configuration.
    length : int, optional
        The number of games to play (default is 10).
    seed : int, optional
        Seed of the first game, later games use the following seeds.
    state_file : Path, optional
        JSON file holding the best score and an unfinished game to resume.
    max_moves : int, optional
        Move cap per game.

    Returns
    -------
    Dict[int, int]
        How many games ended with each largest tile.
    """
    storage = GameStorage(state_file) if state_file is not None else None
    best_score = storage.get_best_score() if storage else 0
    largest = []

    with trange(length) as period:
        for num in period:
            game_seed = None if seed is None else seed + num
            saved = storage.get_game_state() if storage and num == 0 else None
            if saved:
                logger.info("Resuming saved game with score %d", saved.get("score", 0))
                game = TileGame.from_state(saved, seed=game_seed)
            else:
                game = TileGame(seed=game_seed)

            engine = SearchEngine.from_config(game.board, config)
            moves = play_game(game, engine, max_moves=max_moves)

            # ##: Log.
            best_score = max(best_score, game.score)
            period.set_description(f"Evaluation: {num + 1}")
            period.set_postfix(score=game.score, max=game.board.largest_value(), moves=moves)

            if storage:
                storage.set_best_score(best_score)
                if game.over:
                    storage.clear_game_state()
                else:
                    storage.set_game_state(game.serialize())

            largest.append(game.board.largest_value())

    logger.info("Best score: %d", best_score)
    return dict(Counter(largest))


if __name__ == "__main__":
    from argparse import ArgumentParser

    parser = ArgumentParser()
    parser.add_argument("--algorithm", type=str, default=Algorithm.EXPECTIMAX.value, choices=[a.value for a in Algorithm])
    parser.add_argument("--depth", type=int, default=3)
    parser.add_argument("--games", type=int, default=10)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--state-file", type=Path, default=None)
    parser.add_argument("--max-moves", type=int, default=None)
    parser.add_argument("--exact-memo-keys", action="store_true")
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    search_config = SearchConfig(algorithm=args.algorithm, depth_limit=args.depth, exact_memo_keys=args.exact_memo_keys)
    result = evaluate(
        search_config, length=args.games, seed=args.seed, state_file=args.state_file, max_moves=args.max_moves
    )
    print(f"Evaluation of {args.algorithm} at depth {args.depth}, largest tiles: {result}")
