"""
Evaluation of Minesweeper agents.

Plays full games in the environment and reports aggregate results.
"""
import logging
from typing import Dict, Optional

from minefield.board import BoardConfig
from minefield.environment import MinesweeperEnv

from .base_agent import BaseAgent

logger = logging.getLogger(__name__)


# ============================================================================
# Evaluator
# ============================================================================

class Evaluator:
    """
    Evaluate and compare agents.

    Every game is seeded from ``seed`` so different agents face the same
    mine layouts for the same first clicks.
    """

    def __init__(
        self,
        board_config: Optional[BoardConfig] = None,
        num_episodes: int = 100,
        max_steps: int = 1000,
        seed: Optional[int] = None,
    ) -> None:
        """
        Initialize the evaluator.

        Args:
            board_config: Board configuration for evaluation.
            num_episodes: Number of evaluation episodes.
            max_steps: Maximum steps per episode.
            seed: Base seed; episode i uses seed + i.
        """
        self.board_config = board_config or BoardConfig()
        self.num_episodes = num_episodes
        self.max_steps = max_steps
        self.seed = seed

    def evaluate(self, agent: BaseAgent) -> Dict[str, float]:
        """
        Evaluate a single agent.

        Args:
            agent: Agent to evaluate.

        Returns:
            Dictionary with evaluation metrics.
        """
        env = MinesweeperEnv(config=self.board_config, max_steps=self.max_steps)

        wins = 0
        total_reward = 0.0
        total_steps = 0
        total_revealed = 0

        for episode in range(self.num_episodes):
            seed = None if self.seed is None else self.seed + episode
            observation, _ = env.reset(seed=seed)
            agent.reset()
            episode_reward = 0.0

            done = False
            while not done:
                action = agent.select_action(observation, env.get_action_mask())
                observation, reward, terminated, truncated, info = env.step(action)
                episode_reward += reward
                total_steps += 1
                done = terminated or truncated

            if info["game_state"] == "WON":
                wins += 1
            total_revealed += info["revealed"]
            total_reward += episode_reward

            logger.debug(
                "Episode %d finished %s after %d steps",
                episode, info["game_state"], info["steps"],
            )

        return {
            "win_rate": wins / self.num_episodes,
            "avg_reward": total_reward / self.num_episodes,
            "avg_steps": total_steps / self.num_episodes,
            "avg_revealed": total_revealed / self.num_episodes,
        }

    def compare(
        self, agents: Dict[str, BaseAgent]
    ) -> Dict[str, Dict[str, float]]:
        """
        Compare multiple agents.

        Args:
            agents: Dictionary of agent_name -> agent.

        Returns:
            Dictionary of agent_name -> evaluation metrics.
        """
        results = {}
        for name, agent in agents.items():
            logger.info("Evaluating %s...", name)
            results[name] = self.evaluate(agent)
        return results
