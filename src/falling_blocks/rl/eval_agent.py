from __future__ import annotations

import argparse

import gymnasium as gym
import pygame

import falling_blocks.env  # ensure registration
from falling_blocks.visualization.renderer import Renderer


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser()
    p.add_argument("--model", type=str, required=True)
    p.add_argument("--steps", type=int, default=2000)
    p.add_argument("--fps", type=int, default=15)
    p.add_argument("--frame_skip", type=int, default=4)
    return p


def main() -> None:
    args = build_parser().parse_args()
    from stable_baselines3 import PPO

    env = gym.make("FallingBlocks-v0", frame_skip=args.frame_skip)
    model = PPO.load(args.model, device="auto")

    pygame.init()
    try:
        font = pygame.font.SysFont(None, 28)
        renderer = Renderer(cell_size=24, font=font)
        obs, info = env.reset()
        game = env.unwrapped.game
        screen = pygame.display.set_mode(renderer.window_size(game.view()))
        pygame.display.set_caption("Falling Blocks - Agent Eval")
        clock = pygame.time.Clock()

        total_reward = 0.0
        steps = 0
        while steps < args.steps:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    return

            action, _ = model.predict(obs, deterministic=True)
            obs, reward, terminated, truncated, info = env.step(action)
            total_reward += float(reward)
            steps += 1
            if terminated or truncated:
                print(f"episode done: score={info['score']} lines={info['lines']}")
                obs, info = env.reset()

            renderer.draw(screen, env.unwrapped.game.view())
            pygame.display.flip()
            clock.tick(args.fps)
        print(f"step {steps}/{args.steps}  reward {total_reward:.1f}")
    finally:
        env.close()
        pygame.quit()


if __name__ == "__main__":  # pragma: no cover
    main()
