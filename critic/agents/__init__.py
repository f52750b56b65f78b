"""
Agent implementations for Restaurant Critic.

Contains the modules a restaurant list passes through:
- Ingestion Agent
- Opening Hours Parser
- Rating and Comparison Engine (RestaurantCritic)
- Review Table Builder
"""
